import copy
import logging

from utils.errors import ConfigurationError
from utils.openrouter import OpenRouterClient
from utils.sanitize import parse_questions
from classes.validators import DEFAULT_QUESTION_COUNT, DEFAULT_QUESTION_TYPES

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are an expert educator and quiz creator. Generate high-quality quiz "
    "questions based on the provided content. Always return valid JSON."
)

PROMPT_TEMPLATE = """
Generate {question_count} quiz questions based on the following content.
Content: {content}

Question types to include: {question_types}

Format your response as a JSON object with the following structure:
{{
  "questions": [
    {{
      "question": "Question text here",
      "type": "mcq",
      "answers": [
        {{ "text": "Answer option 1", "isCorrect": false }},
        {{ "text": "Answer option 2", "isCorrect": true }},
        {{ "text": "Answer option 3", "isCorrect": false }},
        {{ "text": "Answer option 4", "isCorrect": false }}
      ],
      "explanation": "Explanation of the correct answer"
    }}
  ]
}}

For true/false questions, provide only two answer options: true and false.
For short answer questions, provide the correct answer in the first position of the answers array.
For fill-in-the-blank questions, use the format "This is a _____ in the text" and provide the correct word(s) as the answer.

Make sure the questions are diverse, challenging but fair, and directly related to the content provided.

IMPORTANT: Ensure your response is valid JSON. Do not include any markdown formatting, code blocks, or extra text outside the JSON object.
"""

MOCK_QUESTIONS = [
    {
        "question": "What is the capital of France?",
        "type": "mcq",
        "answers": [
            {"text": "Paris", "isCorrect": True},
            {"text": "London", "isCorrect": False},
            {"text": "Berlin", "isCorrect": False},
            {"text": "Madrid", "isCorrect": False},
        ],
        "explanation": "Paris is the capital and most populous city of France.",
    },
    {
        "question": "The Earth is flat.",
        "type": "true_false",
        "answers": [
            {"text": "True", "isCorrect": False},
            {"text": "False", "isCorrect": True},
        ],
        "explanation": "The Earth is approximately spherical in shape.",
    },
    {
        "question": "What is the chemical symbol for water?",
        "type": "short_answer",
        "answers": [{"text": "H2O", "isCorrect": True}],
        "explanation": "Water consists of two hydrogen atoms and one oxygen atom.",
    },
]


def build_prompt(content, question_count=DEFAULT_QUESTION_COUNT, question_types=None):
    return PROMPT_TEMPLATE.format(
        question_count=question_count,
        question_types=", ".join(question_types or DEFAULT_QUESTION_TYPES),
        content=content,
    )


def get_mock_questions():
    # Callers may mutate what they get back; never hand out the module constant.
    return copy.deepcopy(MOCK_QUESTIONS)


class QuestionGenerator:
    """Turns source text into quiz questions via the upstream model API.

    The generator only produces questions. Recording them is the job of
    QuizRecorder, wired together by the caller.
    """

    def __init__(self, api_key=None, use_mock_data=False, client=None):
        self.api_key = api_key
        self.use_mock_data = use_mock_data
        self.client = client

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get("OPENROUTER_API_KEY"),
            use_mock_data=config.get("USE_MOCK_DATA", False),
            client=OpenRouterClient.from_config(config),
        )

    def generate(self, content, question_count=DEFAULT_QUESTION_COUNT, question_types=None):
        if self.use_mock_data:
            logger.info("Mock mode enabled, returning sample questions")
            return get_mock_questions()

        if not self.api_key:
            raise ConfigurationError("API key not configured")
        if self.client is None:
            raise ConfigurationError("Model API client not configured")

        prompt = build_prompt(content, question_count, question_types)
        reply = self.client.complete(SYSTEM_INSTRUCTION, prompt)
        questions = parse_questions(reply)

        logger.info("Generated %d questions (%d requested)", len(questions), question_count)
        return questions
