"""
User Model

Trip participants who can sign in and contribute to the shared lists.
"""

from .base import db, utcnow


class User(db.Model):
    """Participant account. The username doubles as display name."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        # password_hash never leaves the model
        return {
            'id': self.id,
            'username': self.username,
            'is_admin': self.is_admin,
            'created_at': self.created_at,
        }

    def __repr__(self):
        return f'<User {self.id} {self.username}>'
