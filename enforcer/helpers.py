# Enforcer Helpers
# Utility functions used across the Enforcer apps


def strip_markdown_json(content):
    """Strip markdown code blocks from Claude's JSON response"""
    content = content.strip()
    if content.startswith('```'):
        # Remove first line (```json or ```)
        content = content.split('\n', 1)[1] if '\n' in content else content[3:]
    if content.endswith('```'):
        content = content.rsplit('```', 1)[0]
    return content.strip()


def build_analysis_content(raw_text, history=None):
    """Build the user message for Claude's feedback analysis.

    History (previous rounds) is included so Claude can flag circular
    requests - the client asking for something they already rejected.
    """
    content = f'Current feedback to analyze:\n\n{raw_text}'
    if history:
        content += f"""

Project history (last 3 rounds):
{history}

Compare the current feedback against the project history and report any conflicts."""
    return content
