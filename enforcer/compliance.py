# Enforcer Compliance
# Checks a revision summary against structured feedback items

import math
import re

# Classification thresholds
ADDRESSED_THRESHOLD = 0.4
CLARIFICATION_THRESHOLD = 0.15
SHORT_CONTENT_LENGTH = 25

# Item statuses
STATUS_PENDING = 'PENDING'
STATUS_ADDRESSED = 'ADDRESSED'
STATUS_MISSED = 'MISSED'
STATUS_NEEDS_CLARIFICATION = 'NEEDS_CLARIFICATION'

STOP_WORDS = frozenset([
    'the', 'a', 'an', 'is', 'are', 'was', 'were', 'be', 'been', 'being',
    'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would', 'could',
    'should', 'may', 'might', 'must', 'shall', 'can', 'need', 'dare',
    'ought', 'used', 'to', 'of', 'in', 'for', 'on', 'with', 'at', 'by',
    'from', 'as', 'into', 'through', 'during', 'before', 'after', 'above',
    'below', 'between', 'under', 'again', 'further', 'then', 'once', 'here',
    'there', 'when', 'where', 'why', 'how', 'all', 'each', 'few', 'more',
    'most', 'other', 'some', 'such', 'no', 'nor', 'not', 'only', 'own',
    'same', 'so', 'than', 'too', 'very', 'just', 'and', 'but', 'if', 'or',
    'because', 'until', 'while', 'it', 'its', 'this', 'that', 'these', 'those',
    'i', 'me', 'my', 'we', 'our', 'you', 'your', 'he', 'him', 'his', 'she',
    'her', 'they', 'them', 'their', 'what', 'which', 'who', 'whom',
    # Vague descriptors that carry no actionable meaning
    'feel', 'feels', 'like', 'looks', 'seems', 'think', 'enough', 'still', 'also',
])

_NON_WORD = re.compile(r'[^a-z0-9\s]')


def extract_keywords(text):
    """Reduce text to its content-bearing lowercase tokens.

    Duplicates are kept - the match score divides by the total token count.
    Callers wanting set membership (the revision side) wrap this in set().
    """
    cleaned = _NON_WORD.sub(' ', (text or '').lower())
    return [word for word in cleaned.split() if len(word) > 2 and word not in STOP_WORDS]


def calculate_match_score(feedback_keywords, revision_keywords):
    """Score how well one item's keywords are covered by the revision.

    Each keyword earns 1.0 for an exact hit and a further 0.5 for the first
    revision keyword that contains it or is contained by it. An exact hit
    also satisfies the substring test, so it is worth 1.5 in total.

    Returns total / len(feedback_keywords). Not capped, can exceed 1.0.
    """
    if not feedback_keywords:
        return 0

    matches = 0
    for keyword in feedback_keywords:
        if keyword in revision_keywords:
            matches += 1
        for rev_word in revision_keywords:
            if keyword in rev_word or rev_word in keyword:
                matches += 0.5
                break

    return matches / len(feedback_keywords)


def generate_clarifying_question(feedback):
    """Build a follow-up question for vague or partially addressed feedback"""
    lower = feedback.lower()
    snippet = feedback[:50]

    if 'more' in lower or 'less' in lower or 'too' in lower:
        return f'What specific level of change would satisfy: "{snippet}..."?'
    if 'feel' in lower or 'seems' in lower or 'looks' in lower:
        return f'Could you provide specific examples of what you\'re looking for regarding: "{snippet}..."?'
    if 'change' in lower or 'update' in lower or 'modify' in lower:
        return f'What specific changes would you like to see for: "{snippet}..."?'
    if len(feedback) < 30:
        return f'Could you elaborate on: "{feedback}"?'

    return f'Need more details on: "{snippet}..."'


def classify_item(item, revision_keywords):
    """Classify a single feedback item against the revision keyword set.

    Returns (status, question). question is None unless the status is
    NEEDS_CLARIFICATION.
    """
    content = item.get('content') or ''
    match_score = calculate_match_score(extract_keywords(content), revision_keywords)

    if match_score >= ADDRESSED_THRESHOLD:
        return STATUS_ADDRESSED, None
    if match_score >= CLARIFICATION_THRESHOLD or len(content) < SHORT_CONTENT_LENGTH:
        return STATUS_NEEDS_CLARIFICATION, generate_clarifying_question(content)
    return STATUS_MISSED, None


def calculate_compliance_score(addressed_count, clarification_count, total):
    """Overall compliance percentage, 0-100.

    Clarification items count half. Rounds half up.
    """
    if total == 0:
        return 0

    addressed_weight = addressed_count * 1
    clarification_weight = clarification_count * 0.5
    score = math.floor((addressed_weight + clarification_weight) / total * 100 + 0.5)

    return min(score, 100)


def check_compliance(feedback, revision):
    """Check which feedback items a revision summary addresses.

    Args:
        feedback: List of feedback item dicts (id, content, category,
            priority, requiredAction, status)
        revision: Free-text summary of the changes made

    Returns:
        Dict with addressed, missed, needsClarification ({item, question})
        and score. Items are copies with status overwritten; input order
        is preserved within each bucket.
    """
    revision_keywords = set(extract_keywords(revision))

    addressed = []
    missed = []
    needs_clarification = []

    for item in feedback:
        status, question = classify_item(item, revision_keywords)
        classified = {**item, 'status': status}

        if status == STATUS_ADDRESSED:
            addressed.append(classified)
        elif status == STATUS_NEEDS_CLARIFICATION:
            needs_clarification.append({'item': classified, 'question': question})
        else:
            missed.append(classified)

    return {
        'addressed': addressed,
        'missed': missed,
        'needsClarification': needs_clarification,
        'score': calculate_compliance_score(len(addressed), len(needs_clarification), len(feedback))
    }
