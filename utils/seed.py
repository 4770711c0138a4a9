"""
Seed Module - Demo portfolio for local development
"""

from flask import current_app
from extensions import db
from models import User, Education, Experience, Skill, Project, Certification, Language
from .helpers import normalize_email
from .security import hash_password


DEMO_PROFILE = {
    'name': 'Alex Morgan',
    'title': 'Web Developer | Graphic Designer',
    'summary': 'Motivated developer with a focus on web development, graphic design and security.',
    'location': 'Remote',
    'phone': '+1-555-0100',
    'linkedin': 'linkedin.com/in/alex-morgan-demo',
}

DEMO_RECORDS = [
    (Education, {'institution': 'City Science College', 'degree': 'Intermediate in Computer Science', 'year': 'In Progress'}),
    (Education, {'institution': 'Public School System', 'degree': 'Matriculation in Computer Science', 'year': 'Completed'}),
    (Experience, {'company': 'Example Software House', 'role': 'Frontend Intern', 'duration': 'Paid Internship',
                  'description': 'Worked on Angular web projects and collaborated with the team.'}),
    (Skill, {'category': 'Technical', 'items': ['JavaScript', 'React', 'Angular', 'WordPress']}),
    (Skill, {'category': 'Design', 'items': ['Photoshop', 'Illustrator', 'Canva']}),
    (Skill, {'category': 'Soft Skills', 'items': ['Communication', 'Teamwork', 'Time Management']}),
    (Project, {'title': 'WordPress Websites', 'description': 'Two live websites for small business clients.', 'link': None}),
    (Project, {'title': 'Web Development', 'description': 'Various projects using JavaScript and React.', 'link': None}),
    (Certification, {'title': 'Web Development (JS, React)', 'issuer': 'Online Bootcamp'}),
    (Certification, {'title': 'Graphic Designing', 'issuer': 'Self-learned'}),
    (Language, {'language': 'English', 'proficiency': 'Fluent'}),
]


def seed_demo_portfolio(email, password):
    """Create the demo user and records; returns None if the email is taken"""
    email = normalize_email(email)
    if User.query.filter_by(email=email).first():
        return None

    user = User(email=email, password_hash=hash_password(password), **DEMO_PROFILE)
    db.session.add(user)
    db.session.flush()
    for model, values in DEMO_RECORDS:
        db.session.add(model(user_id=user.id, **values))
    db.session.commit()
    current_app.logger.info(f"Seeded demo portfolio for {user.id}")
    return user
