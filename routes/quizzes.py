import logging

from flask import Blueprint, jsonify, g, request, current_app
from models import db
from models.quizzes import Quiz
from classes.question_generator import QuestionGenerator
from classes.quiz_recorder import QuizRecorder
from classes.validators import validate_generation_request
from utils.errors import UpstreamAPIError
from utils.utils import login_required

logger = logging.getLogger(__name__)

quiz_bp = Blueprint("quiz", __name__)

GENERIC_ERROR_MESSAGE = "Failed to generate questions"


#__________________________________________________________________________________________ * Generation *__________________________________________________

@quiz_bp.route("/generate-questions", methods=["POST"])
def generate_questions():
    data = request.get_json(silent=True)

    try:
        params = validate_generation_request(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        generator = QuestionGenerator.from_config(current_app.config)
        questions = generator.generate(
            params["content"],
            params["question_count"],
            params["question_types"],
        )
    except UpstreamAPIError as e:
        logger.error("Error generating questions: %s (status=%s, detail=%s)", e, e.status_code, e.detail)
        return jsonify({"error": str(e) or GENERIC_ERROR_MESSAGE}), 500
    except Exception as e:
        logger.exception("Error generating questions")
        return jsonify({"error": str(e) or GENERIC_ERROR_MESSAGE}), 500

    body = {"questions": questions}

    # Sample data is for offline testing only; it never lands in a user's library.
    if generator.use_mock_data:
        return jsonify(body), 200

    recorder = QuizRecorder(current_app.config.get("QUIZ_DESCRIPTION_LENGTH", 100))
    quiz_id = recorder.record(questions, params["content"], params["time_limit"])

    if quiz_id is not None:
        body["quizId"] = quiz_id
    return jsonify(body), 200


#__________________________________________________________________________________________ * My Quizzes *__________________________________________________

def _owned_quiz(quiz_id):
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz or quiz.user_id != g.user.get("user_id"):
        return None
    return quiz


# Fetch the logged-in user's quizzes
@quiz_bp.route("/quizzes", methods=["GET"])
@login_required
def get_my_quizzes():
    quizzes = Quiz.query.filter_by(user_id=g.user.get("user_id")).order_by(
        Quiz.created_at.desc(), Quiz.id.desc()
    ).all()
    return jsonify({"quizzes": [quiz.to_summary() for quiz in quizzes]}), 200


# Fetch one quiz with its questions and answers
@quiz_bp.route("/quizzes/<int:quiz_id>", methods=["GET"])
@login_required
def get_quiz(quiz_id):
    quiz = _owned_quiz(quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404

    return jsonify(quiz.to_dict()), 200


# DELETE a Quiz
@quiz_bp.route("/quizzes/<int:quiz_id>", methods=["DELETE"])
@login_required
def delete_quiz(quiz_id):
    quiz = _owned_quiz(quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404

    db.session.delete(quiz)
    db.session.commit()

    return jsonify({"message": "Quiz deleted successfully"}), 200
