# Enforcer Parser
# Splits raw pasted feedback into structured feedback items

import re

from .compliance import STATUS_PENDING

CATEGORY_KEYWORDS = [
    ('COPY', ['copy', 'tone', 'text', 'wording', 'content']),
    ('UX', ['ux', 'flow', 'navigation', 'usability', 'confusing']),
    ('TECHNICAL', ['bug', 'error', 'technical', 'code', 'broken']),
    ('DESIGN', ['design', 'visual', 'cta', 'image', 'color', 'button', 'hero']),
]

PRIORITY_KEYWORDS = [
    ('CRITICAL', ['urgent', 'critical', 'asap', 'immediately', 'broken']),
    ('HIGH', ['important', 'must', 'need', 'not visible', "can't"]),
    ('LOW', ['consider', 'maybe', 'could', 'minor']),
]

ACTION_PREFIXES = {
    'DESIGN': 'Update design:',
    'COPY': 'Revise copy:',
    'UX': 'Improve flow:',
    'TECHNICAL': 'Fix issue:',
    'GENERAL': 'Address feedback:',
}

MIN_LINE_LENGTH = 5
MAX_ACTION_LENGTH = 60


def split_feedback(text):
    """Split raw feedback into individual lines.

    Handles bullet points, numbered lists and quoted lines. Lines of five
    characters or fewer are dropped.
    """
    lines = []
    for line in re.split(r'[\n\r]+', text):
        line = line.strip()
        if not line:
            continue
        line = re.sub(r'^[-•*]\s*', '', line)
        line = re.sub(r'^\d+[.)]\s*', '', line)
        line = re.sub(r'^["\']|["\']$', '', line).strip()
        if len(line) > MIN_LINE_LENGTH:
            lines.append(line)
    return lines


def detect_category(text):
    lower = text.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return category
    return 'GENERAL'


def detect_priority(text):
    lower = text.lower()
    for priority, keywords in PRIORITY_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return priority
    return 'MEDIUM'


def generate_action(text, category):
    """Build the required-action line (e.g., 'Revise copy: Make the headline punchier')"""
    prefix = ACTION_PREFIXES.get(category, 'Address:')
    short_content = text[:57] + '...' if len(text) > MAX_ACTION_LENGTH else text
    return f'{prefix} {short_content}'


def format_feedback_id(index):
    """Format a zero-based index as a feedback id (e.g., 0 -> 'FB-001')"""
    return f'FB-{str(index + 1).zfill(3)}'


def parse_feedback(text):
    """Turn raw feedback text into a list of feedback item dicts"""
    items = []
    for index, content in enumerate(split_feedback(text)):
        category = detect_category(content)
        items.append({
            'id': format_feedback_id(index),
            'content': content,
            'category': category,
            'priority': detect_priority(content),
            'requiredAction': generate_action(content, category),
            'status': STATUS_PENDING
        })
    return items


def items_from_tasks(tasks):
    """Turn a list of task strings (e.g., from Claude's analysis) into feedback items"""
    tasks = [task.strip() for task in tasks if isinstance(task, str) and task.strip()]
    return [
        {
            'id': format_feedback_id(index),
            'content': task,
            'category': 'GENERAL',
            'priority': 'MEDIUM',
            'requiredAction': generate_action(task, 'GENERAL'),
            'status': STATUS_PENDING
        }
        for index, task in enumerate(tasks)
    ]
