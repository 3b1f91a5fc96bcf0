import logging

from models import db
from models.quizzes import Quiz
from models.questions import Question
from models.answers import Answer
from utils.helpers import generated_quiz_title, quiz_description
from utils.utils import get_current_user

logger = logging.getLogger(__name__)


class QuizRecorder:
    """Best-effort storage of a generated question set.

    Nothing in here raises: a storage outage must never cost the user the
    questions they already got back.
    """

    def __init__(self, description_length=100):
        self.description_length = description_length

    def record(self, questions, content, time_limit=None, user_lookup=None):
        """Save the quiz for the logged-in user. Returns the quiz id or None."""
        try:
            user = (user_lookup or get_current_user)()
            if user is None:
                logger.debug("No logged-in user, generated quiz not saved")
                return None

            quiz = Quiz(
                user_id=user.id,
                title=generated_quiz_title(),
                description=quiz_description(content, self.description_length),
                time_limit=time_limit,
                is_published=True,
            )
            db.session.add(quiz)
            db.session.commit()

            for position, item in enumerate(questions):
                self._record_question(quiz.id, position, item)

            return quiz.id
        except Exception:
            logger.exception("Error saving generated quiz to database")
            db.session.rollback()
            return None

    def _record_question(self, quiz_id, position, item):
        # Each question commits with its answers; a failure here drops only
        # this question and leaves the ones already saved in place.
        try:
            question = Question(
                quiz_id=quiz_id,
                question_text=item["question"],
                question_type=item["type"],
                points=1,
                explanation=item.get("explanation"),
            )
            db.session.add(question)
            db.session.flush()

            for answer in item.get("answers") or []:
                db.session.add(Answer(
                    question_id=question.id,
                    answer_text=answer["text"],
                    is_correct=bool(answer.get("isCorrect", False)),
                ))
            db.session.commit()
        except Exception:
            logger.exception("Error saving question %d of quiz %s", position, quiz_id)
            db.session.rollback()
