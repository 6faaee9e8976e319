# Enforcer Shared Module
# Common functions used across the Enforcer apps

from .config import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_MODEL,
    PORT,
    SERVICE_VERSION
)

from .helpers import (
    strip_markdown_json,
    build_analysis_content
)

from .compliance import (
    extract_keywords,
    calculate_match_score,
    generate_clarifying_question,
    classify_item,
    calculate_compliance_score,
    check_compliance
)

from .parser import (
    parse_feedback,
    items_from_tasks
)
