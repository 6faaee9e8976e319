"""Tests for the Enforcer Feedback Flask app."""

import json

CTA_REVISION = 'Increased CTA size and changed color to dark navy blue'

ANALYSIS = {
    'tasks': ['Make the logo bigger', 'Use the navy from the brand guide'],
    'questions': ['Can we see a dark mode version?'],
    'sentiment': 'neutral',
    'tone': 'Constructive',
    'summary': 'Client wants a bolder logo in brand navy.',
    'patterns': ['Client frequently mentions the logo'],
    'confidenceScore': 85
}


class TestHealth:

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json()['status'] == 'healthy'


class TestParseEndpoint:

    def test_parse(self, client):
        response = client.post('/feedback/parse', json={'feedback': '- Make the CTA button bigger\n- Fix the broken form'})

        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        assert data['count'] == 2
        assert data['items'][1]['priority'] == 'CRITICAL'

    def test_parse_requires_text(self, client):
        assert client.post('/feedback/parse', json={}).status_code == 400
        assert client.post('/feedback/parse', json={'feedback': ['a list']}).status_code == 400


class TestAnalyzeEndpoint:

    def test_analyze(self, client, fake_claude):
        fake = fake_claude('```json\n' + json.dumps(ANALYSIS) + '\n```')

        response = client.post('/feedback/analyze', json={'text': 'Logo is too small, use our navy'})

        assert response.status_code == 200
        data = response.get_json()
        assert data['sentiment'] == 'neutral'
        assert data['conflicts'] == []
        assert [item['id'] for item in data['items']] == ['FB-001', 'FB-002']
        assert data['items'][0]['content'] == 'Make the logo bigger'
        assert 'Logo is too small' in fake.messages.calls[0]['messages'][0]['content']

    def test_analyze_includes_history(self, client, fake_claude):
        fake = fake_claude(json.dumps(ANALYSIS))

        client.post('/feedback/analyze', json={'text': 'Go back to the red logo', 'history': 'Round 1: make the logo navy'})

        content = fake.messages.calls[0]['messages'][0]['content']
        assert 'Round 1: make the logo navy' in content

    def test_analyze_invalid_json(self, client, fake_claude):
        fake_claude('Sorry, I cannot help with that')

        response = client.post('/feedback/analyze', json={'text': 'Logo is too small'})

        assert response.status_code == 500
        data = response.get_json()
        assert data['error'] == 'Claude returned invalid JSON'
        assert data['raw_response'] == 'Sorry, I cannot help with that'

    def test_analyze_requires_text(self, client, fake_claude):
        fake_claude(json.dumps(ANALYSIS))
        assert client.post('/feedback/analyze', json={}).status_code == 400

    def test_analyze_without_api_key(self, client, monkeypatch):
        from feedback import app as feedback_app
        monkeypatch.setattr(feedback_app, 'anthropic_client', None)

        response = client.post('/feedback/analyze', json={'text': 'Logo is too small'})

        assert response.status_code == 503


class TestCheckEndpoint:

    def test_check(self, client, cta_item):
        response = client.post('/feedback/check', json={'feedback': [cta_item], 'revision': CTA_REVISION})

        assert response.status_code == 200
        data = response.get_json()
        assert data['score'] == 100
        assert data['addressed'][0]['id'] == 'FB-001'
        assert data['addressed'][0]['status'] == 'ADDRESSED'
        assert data['missed'] == []
        assert data['needsClarification'] == []

    def test_check_clarification_shape(self, client):
        item = {'id': 'FB-002', 'content': 'It still feels off'}
        response = client.post('/feedback/check', json={'feedback': [item], 'revision': 'Updated the footer links'})

        data = response.get_json()
        assert data['score'] == 50
        assert data['needsClarification'][0]['item']['status'] == 'NEEDS_CLARIFICATION'
        assert data['needsClarification'][0]['question'].startswith('Could you provide specific examples')

    def test_check_empty_feedback_list(self, client):
        response = client.post('/feedback/check', json={'feedback': [], 'revision': CTA_REVISION})

        assert response.status_code == 200
        assert response.get_json()['score'] == 0

    def test_check_requires_feedback_array(self, client):
        response = client.post('/feedback/check', json={'feedback': 'not a list', 'revision': CTA_REVISION})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Feedback array is required'

        assert client.post('/feedback/check', json={'revision': CTA_REVISION}).status_code == 400

    def test_check_requires_revision(self, client, cta_item):
        for payload in [{'feedback': [cta_item]}, {'feedback': [cta_item], 'revision': ''}, {'feedback': [cta_item], 'revision': 5}]:
            response = client.post('/feedback/check', json=payload)
            assert response.status_code == 400
            assert response.get_json()['error'] == 'Revision summary is required'

    def test_check_rejects_non_object_items(self, client):
        response = client.post('/feedback/check', json={'feedback': ['Make the logo bigger'], 'revision': CTA_REVISION})
        assert response.status_code == 400

    def test_check_rejects_non_json_body(self, client):
        response = client.post('/feedback/check', data='not json', content_type='text/plain')
        assert response.status_code == 400
