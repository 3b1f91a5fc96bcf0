from flask_sqlalchemy import SQLAlchemy

# Initialize SQLAlchemy
db = SQLAlchemy()

# Import models
from models.users import User

from models.quizzes import Quiz
from models.questions import Question
from models.answers import Answer
