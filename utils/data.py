"""
Data Management Module - Loading content rows and converting them to dictionaries
Every public and admin read goes through the loaders below so list ordering
is decided in exactly one place.
"""

from flask import current_app
from extensions import db
from models import Skill, Experience, Portfolio


def _isoformat(value):
    return value.isoformat() if value else None


def skill_to_dict(skill):
    """Convert skill model to dictionary"""
    return {
        'id': skill.id,
        'title': skill.title,
        'skills': skill.skills,
        'link': skill.link
    }


def experience_to_dict(experience):
    """Convert experience model to dictionary"""
    return {
        'id': experience.id,
        'title': experience.title,
        'company': experience.company,
        'startDate': experience.start_date,
        'description': experience.description,
        'tools': list(experience.tools or []),
        'isActive': bool(experience.is_active),
        'order': experience.order,
        'createdAt': _isoformat(experience.created_at),
        'updatedAt': _isoformat(experience.updated_at)
    }


def portfolio_to_dict(portfolio):
    """Convert portfolio model to dictionary"""
    return {
        'id': portfolio.id,
        'title': portfolio.title,
        'description': portfolio.description,
        'technologies': list(portfolio.technologies or []),
        'category': portfolio.category,
        'imageUrls': list(portfolio.image_urls or []),
        'projectUrl': portfolio.project_url,
        'githubUrl': portfolio.github_url,
        'isActive': bool(portfolio.is_active),
        'createdAt': _isoformat(portfolio.created_at),
        'updatedAt': _isoformat(portfolio.updated_at)
    }


def load_skills():
    """All skills in insertion order"""
    return [skill_to_dict(s) for s in Skill.query.order_by(Skill.id.asc()).all()]


def load_experiences():
    """All experiences by manual order ascending, unordered rows last"""
    rows = Experience.query.order_by(
        Experience.order.asc().nulls_last(),
        Experience.id.asc()
    ).all()
    return [experience_to_dict(e) for e in rows]


def load_portfolios():
    """All portfolios, most recently updated first"""
    rows = Portfolio.query.order_by(
        Portfolio.updated_at.desc(),
        Portfolio.id.desc()
    ).all()
    return [portfolio_to_dict(p) for p in rows]


def get_content_counts(count_projects=False):
    """Row counts for the admin dashboard"""
    counts = {
        'skills': db.session.query(Skill).count(),
        'experiences': db.session.query(Experience).count(),
        'projects': 0
    }
    if count_projects:
        counts['projects'] = db.session.query(Portfolio).count()
    current_app.logger.debug(f"Content counts: {counts}")
    return counts
