from datetime import datetime


def format_datetime(datetime_obj):
    """Format datetime to a readable string."""
    if not datetime_obj:
        return None
    return datetime_obj.strftime('%Y-%m-%d %H:%M:%S')


def generated_quiz_title(now=None):
    return f"Generated Quiz - {format_datetime(now or datetime.now())}"


def quiz_description(content, length=100):
    """Short preview of the source text used as the quiz description."""
    return f"Generated from content: {content[:length]}..."
