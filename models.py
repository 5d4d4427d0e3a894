from extensions import db
from datetime import datetime
from sqlalchemy import JSON


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class Skill(db.Model):
    __tablename__ = 'skill_cards'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    skills = db.Column(db.Text, nullable=False)  # free-text description
    link = db.Column(db.String(500))


class Experience(db.Model):
    __tablename__ = 'experiences'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    start_date = db.Column(db.String(100), nullable=False)  # free text, e.g. "Jan 2023"
    description = db.Column(db.Text, nullable=False)
    tools = db.Column(SafeJSON, default=list)
    is_active = db.Column(db.Boolean, default=False, nullable=False)
    order = db.Column(db.Integer)  # manual sort key, nullable
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Portfolio(db.Model):
    __tablename__ = 'portfolios'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    technologies = db.Column(SafeJSON, default=list)
    category = db.Column(db.String(100), nullable=False)  # suggested set, not enforced
    image_urls = db.Column(SafeJSON, default=list)
    project_url = db.Column(db.String(500))
    github_url = db.Column(db.String(500))
    is_active = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_portfolio_updated', 'updated_at'),
    )
