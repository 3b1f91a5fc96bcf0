from models import db


class Quiz(db.Model):
    __tablename__ = "quizzes"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    time_limit = db.Column(db.Integer, nullable=True)
    is_published = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=db.func.now())

    owner = db.relationship("User", back_populates="quizzes")
    # Questions come back in insertion order; the store does not keep one otherwise.
    questions = db.relationship(
        "Question",
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="Question.id",
    )

    @property
    def total_questions(self):
        """Dynamically count total questions without storing in the database"""
        return len(self.questions)

    def __repr__(self):
        return f"<Quiz {self.title}>"

    def to_summary(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "time_limit": self.time_limit,
            "is_published": self.is_published,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "total_questions": self.total_questions,
        }

    def to_dict(self):
        return {
            **self.to_summary(),
            "user_id": self.user_id,
            "questions": [q.to_dict() for q in self.questions],
        }
