# Enforcer Feedback
# Client feedback processing for design agencies
#
# - Parse pasted feedback into structured items
# - Analyse feedback with Claude (tasks, questions, sentiment, loops)
# - Check a revision summary against the feedback items

import sys
import os

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, request, jsonify
from anthropic import Anthropic
import httpx
import json

from enforcer import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_MODEL,
    PORT,
    SERVICE_VERSION,
    strip_markdown_json,
    build_analysis_content,
    parse_feedback,
    items_from_tasks,
    check_compliance
)

app = Flask(__name__)

# Anthropic client (analysis is unavailable without a key)
anthropic_client = None
if ANTHROPIC_API_KEY:
    anthropic_client = Anthropic(
        api_key=ANTHROPIC_API_KEY,
        http_client=httpx.Client(timeout=60.0, follow_redirects=True)
    )

# Load prompt
PROMPT_PATH = os.path.join(os.path.dirname(__file__), 'prompt.txt')
with open(PROMPT_PATH, 'r') as f:
    ANALYSIS_PROMPT = f.read()


@app.route('/feedback/parse', methods=['POST'])
def parse():
    """Split raw feedback into structured items.
    
    Accepts:
        - feedback: Raw feedback text (bullets, numbered lists, one per line)
    
    Returns:
        - items: Feedback items with id, category, priority, requiredAction
        - count: Number of items
    """
    try:
        data = request.get_json(silent=True) or {}
        feedback = data.get('feedback')
        
        if not feedback or not isinstance(feedback, str):
            return jsonify({'error': 'Feedback text is required'}), 400
        
        items = parse_feedback(feedback)
        
        return jsonify({
            'success': True,
            'items': items,
            'count': len(items)
        })
        
    except Exception as e:
        print(f"Error parsing feedback: {e}")
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/feedback/analyze', methods=['POST'])
def analyze():
    """Analyse raw feedback with Claude.
    
    Accepts:
        - text: Raw client feedback
        - history: Previous rounds of feedback (optional)
    
    Returns:
        - tasks, questions, sentiment, tone, summary, patterns,
          confidenceScore, conflicts
        - items: Feedback items built from the tasks
    """
    try:
        data = request.get_json(silent=True) or {}
        text = data.get('text')
        history = data.get('history')
        
        if not text or not isinstance(text, str):
            return jsonify({'error': 'Text is required'}), 400
        
        if anthropic_client is None:
            print("No Anthropic API key configured")
            return jsonify({'error': 'Feedback analysis is not configured'}), 503
        
        # Call Claude for feedback analysis
        response = anthropic_client.messages.create(
            model=ANTHROPIC_MODEL,
            max_tokens=2000,
            temperature=0.1,
            system=ANALYSIS_PROMPT,
            messages=[
                {'role': 'user', 'content': build_analysis_content(text, history)}
            ]
        )
        
        # Parse response
        content = response.content[0].text
        content = strip_markdown_json(content)
        analysis = json.loads(content)
        
        analysis.setdefault('conflicts', [])
        analysis['items'] = items_from_tasks(analysis.get('tasks') or [])
        
        return jsonify(analysis)
        
    except json.JSONDecodeError as e:
        return jsonify({
            'error': 'Claude returned invalid JSON',
            'details': str(e),
            'raw_response': content if 'content' in locals() else 'No response'
        }), 500
    except Exception as e:
        print(f"Error analysing feedback: {e}")
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/feedback/check', methods=['POST'])
def check():
    """Check which feedback items a revision addresses.
    
    Accepts:
        - feedback: List of feedback items (id, content, category, ...)
        - revision: Summary of the changes made
    
    Returns:
        - addressed: Items the revision covers
        - missed: Items with no match in the revision
        - needsClarification: {item, question} pairs
        - score: Compliance percentage (0-100)
    """
    try:
        data = request.get_json(silent=True) or {}
        feedback = data.get('feedback')
        revision = data.get('revision')
        
        if feedback is None or not isinstance(feedback, list):
            return jsonify({'error': 'Feedback array is required'}), 400
        
        if not revision or not isinstance(revision, str):
            return jsonify({'error': 'Revision summary is required'}), 400
        
        if not all(isinstance(item, dict) for item in feedback):
            return jsonify({'error': 'Feedback items must be objects'}), 400
        
        result = check_compliance(feedback, revision)
        
        print(f"Compliance check: {len(feedback)} items, score {result['score']}")
        return jsonify(result)
        
    except Exception as e:
        print(f"Error checking compliance: {e}")
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Enforcer Feedback',
        'version': SERVICE_VERSION
    })


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=PORT)
