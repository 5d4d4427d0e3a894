"""
Notifications Module - Email delivery for the public contact form
"""

import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app


def load_smtp_config():
    """Load SMTP configuration from the application config"""
    return {
        'host': current_app.config.get('SMTP_HOST'),
        'port': current_app.config.get('SMTP_PORT', '587'),
        'email': current_app.config.get('SMTP_EMAIL'),
        'password': current_app.config.get('SMTP_PASSWORD'),
        'recipient': current_app.config.get('CONTACT_RECIPIENT') or current_app.config.get('SMTP_EMAIL')
    }


def smtp_configured(smtp_config=None):
    smtp_config = smtp_config or load_smtp_config()
    return all([
        smtp_config.get('host'),
        smtp_config.get('port'),
        smtp_config.get('email'),
        smtp_config.get('password'),
        smtp_config.get('recipient')
    ])


def send_email(recipient, subject, body, html=False, reply_to=None):
    """
    Send email using the configured SMTP account

    Args:
        recipient (str): Email recipient
        subject (str): Email subject
        body (str): Email body
        html (bool): Whether body is HTML
        reply_to (str, optional): Address replies should go to

    Returns:
        bool: Success status
    """
    smtp_config = load_smtp_config()
    if not smtp_configured(smtp_config):
        current_app.logger.debug("SMTP config incomplete, email not sent")
        return False

    msg = MIMEMultipart('alternative')
    msg['Subject'] = subject
    msg['From'] = smtp_config.get('email')
    msg['To'] = recipient
    if reply_to:
        msg['Reply-To'] = reply_to

    if html:
        msg.attach(MIMEText(body, 'html'))
    else:
        msg.attach(MIMEText(body, 'plain'))

    try:
        with smtplib.SMTP(smtp_config.get('host'),
                          int(smtp_config.get('port'))) as server:
            server.starttls()
            server.login(smtp_config.get('email'), smtp_config.get('password'))
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Error sending email to {recipient}: {str(e)}")
        return False

    current_app.logger.info(f"Email sent to {recipient}")
    return True


def send_contact_message(name, email, message):
    """Forward a contact form submission to the site owner"""
    smtp_config = load_smtp_config()
    subject = f"New message from {name}"
    body = f"From: {name} <{email}>\n\n{message}"
    return send_email(smtp_config.get('recipient'), subject, body, reply_to=email)


__all__ = [
    'load_smtp_config',
    'smtp_configured',
    'send_email',
    'send_contact_message'
]
