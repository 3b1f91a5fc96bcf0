# validators.py

QUESTION_TYPES = ("mcq", "true_false", "short_answer", "fill_blank")

DEFAULT_QUESTION_COUNT = 10
DEFAULT_QUESTION_TYPES = ["mcq"]


def validate_length(field_name, value, max_length):
    if len(value) > max_length:
        raise ValueError(f"{field_name} must be {max_length} characters or fewer.")


def validate_content(content):
    if not isinstance(content, str) or not content.strip():
        raise ValueError("Content is required")
    return content


def validate_question_count(question_count):
    if question_count is None:
        return DEFAULT_QUESTION_COUNT
    # bool is an int subclass; reject it explicitly
    if isinstance(question_count, bool) or not isinstance(question_count, int) or question_count < 1:
        raise ValueError("questionCount must be a positive integer.")
    return question_count


def validate_question_types(question_types):
    if question_types is None:
        return list(DEFAULT_QUESTION_TYPES)
    if not isinstance(question_types, list) or not question_types:
        raise ValueError("questionTypes must be a non-empty list.")

    unknown = [t for t in question_types if t not in QUESTION_TYPES]
    if unknown:
        raise ValueError(
            f"Unsupported question type(s): {', '.join(map(str, unknown))}. "
            f"Expected any of: {', '.join(QUESTION_TYPES)}."
        )
    # drop duplicates, keep the caller's order
    return list(dict.fromkeys(question_types))


def validate_time_limit(time_limit):
    if time_limit is None:
        return None
    if isinstance(time_limit, bool) or not isinstance(time_limit, int) or time_limit < 1:
        raise ValueError("timeLimit must be a positive integer.")
    return time_limit


def validate_generation_request(data):
    """Check a generate-questions payload and fill in defaults.

    Content is checked first so a missing body always reports it.
    Raises ValueError with a client-facing message.
    """
    if not isinstance(data, dict):
        raise ValueError("Content is required")

    return {
        "content": validate_content(data.get("content")),
        "question_count": validate_question_count(data.get("questionCount")),
        "question_types": validate_question_types(data.get("questionTypes")),
        "time_limit": validate_time_limit(data.get("timeLimit")),
    }
