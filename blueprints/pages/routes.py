"""
Pages Routes - Public pages and contact form
Inactive rows are dropped before any grouping or rendering.
"""

from datetime import datetime
from flask import render_template, request, jsonify, current_app
from utils.data import load_skills, load_experiences, load_portfolios
from utils.errors import ValidationError, RateLimited, ServiceUnavailable, UnexpectedError
from utils.listing import active_only, category_buckets, select_bucket, timeline
from utils.notifications import smtp_configured, send_contact_message
from utils.security import check_rate_limit, get_client_ip
from . import pages_bp


@pages_bp.route('/')
def index():
    """Home page - hero, about, skills, experience timeline, contact form"""
    skills = load_skills()
    experiences = timeline(
        active_only(load_experiences()),
        direction=current_app.config.get('TIMELINE_ORDER', 'desc')
    )
    return render_template('index.html',
                           skills=skills,
                           experiences=experiences,
                           current_year=datetime.now().year)


@pages_bp.route('/portofolio')
def portfolio():
    """Project gallery with category tabs"""
    portfolios = active_only(load_portfolios())
    categories = category_buckets(portfolios)

    active_category = request.args.get('category', 'all')
    if not any(c['id'] == active_category for c in categories):
        active_category = 'all'

    return render_template('portfolio.html',
                           portfolios=select_bucket(portfolios, categories, active_category),
                           total=len(portfolios),
                           categories=categories,
                           active_category=active_category,
                           current_year=datetime.now().year)


@pages_bp.route('/api/send-email', methods=['POST'])
def send_email():
    """Public contact form - forwards the message to the site owner"""
    payload = request.get_json(silent=True) or {}
    name = str(payload.get('name') or '').strip()
    email = str(payload.get('email') or '').strip()
    message = str(payload.get('message') or '').strip()

    if not name or not email or not message:
        raise ValidationError('Name, email and message are required')
    if '@' not in email:
        raise ValidationError('Invalid email address')

    if not check_rate_limit('contact'):
        current_app.logger.warning(f"Contact form rate limit hit by {get_client_ip()}")
        raise RateLimited()

    if not smtp_configured():
        current_app.logger.error("Contact form submitted but SMTP is not configured")
        raise ServiceUnavailable('Email service is not configured')

    if not send_contact_message(name, email, message[:5000]):
        raise UnexpectedError('Failed to send message')

    current_app.logger.info(f"Contact message from {email} delivered")
    return jsonify({'success': True, 'message': 'Message sent successfully!'})


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for the public pages"""
    base_url = request.url_root.rstrip('/')
    lastmod = datetime.now().strftime('%Y-%m-%d')

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')
    for path, priority in (('/', '1.0'), ('/portofolio', '0.8')):
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{base_url}{path}</loc>')
        sitemap_xml.append(f'<lastmod>{lastmod}</lastmod>')
        sitemap_xml.append('<changefreq>weekly</changefreq>')
        sitemap_xml.append(f'<priority>{priority}</priority>')
        sitemap_xml.append('</url>')
    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt"""
    robots_txt = """User-agent: *
Allow: /
Allow: /portofolio
Disallow: /api/

Sitemap: """ + request.url_root.rstrip('/') + """/sitemap.xml"""

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
