import json
from unittest import mock

import requests

SINGLE_QUESTION_REPLY = json.dumps({
    "questions": [
        {"question": "Q", "type": "mcq", "answers": [{"text": "A", "isCorrect": True}]}
    ]
})


def model_response(content, status_code=200):
    """Fake requests.Response carrying a chat-completion body."""
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    body = {"choices": [{"message": {"role": "assistant", "content": content}}]}
    response.json.return_value = body
    response.text = json.dumps(body)
    return response


def error_response(status_code, body=None):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = False
    response.json.return_value = body or {"error": {"message": "rate limited"}}
    response.text = json.dumps(response.json.return_value)
    return response
