from models import db


class Question(db.Model):
    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id"), nullable=False, index=True)
    question_text = db.Column(db.Text, nullable=False)
    question_type = db.Column(db.String(20), nullable=False)
    points = db.Column(db.Integer, nullable=False, default=1)
    explanation = db.Column(db.Text, nullable=True)

    quiz = db.relationship("Quiz", back_populates="questions")
    answers = db.relationship(
        "Answer",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="Answer.id",
    )

    def to_dict(self):
        """Same shape the generator hands back, plus row ids."""
        data = {
            "id": self.id,
            "question": self.question_text,
            "type": self.question_type,
            "points": self.points,
            "answers": [a.to_dict() for a in self.answers],
        }
        if self.explanation:
            data["explanation"] = self.explanation
        return data
