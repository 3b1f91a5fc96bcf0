from models import db
from classes.validators import validate_length
from werkzeug.security import generate_password_hash, check_password_hash


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), nullable=False, unique=True)
    email = db.Column(db.String(100), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    full_name = db.Column(db.String(100), nullable=False)
    date_created = db.Column(db.DateTime, default=db.func.now(), nullable=False)

    quizzes = db.relationship("Quiz", back_populates="owner", cascade="all, delete-orphan")

    def __init__(self, **kwargs):
        validate_length("username", kwargs.get("username") or "", 50)
        validate_length("email", kwargs.get("email") or "", 100)
        validate_length("full_name", kwargs.get("full_name") or "", 100)
        super().__init__(**kwargs)

    def set_password(self, password):
        """Hashes the password before storing."""
        self.password_hash = generate_password_hash(password, method="pbkdf2:sha256")

    def check_password(self, password):
        """Checks if a given password matches the stored hash."""
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<User {self.username}>"

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "full_name": self.full_name,
            "date_created": self.date_created.isoformat() if self.date_created else None,
        }
