"""
Chat relay to the Gemini generative language API.

Each call is a pass-through: the caller resends the conversation history it
wants considered, nothing is kept server side.
"""

import logging

import requests
from django.conf import settings

from services import errors

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """
You are the official AI assistant for the Projects Management System.

CONTEXT:
- This system is used by government officials to manage internal infrastructure and service projects.
- Core fields: PID (Unique ID), Project Name, Lead Manager, Ministry, Type (NEW, ONGOING, ON_HOLD, COMPLETED), Status (Narrative Progress), Funding (YES/NO/FUNDED), and Contract Value.
- Key Features: Total project dashboard, filtering, searching, and exporting reports to Excel/PDF.
- Projects can be saved as drafts; drafts are not counted on the dashboard until published.

INSTRUCTIONS:
- Be helpful, professional, and concise.
- Use bullet points for steps or lists.
- If the user asks how to do something, explain the steps (e.g., "Go to the Projects page and click the 'New Project' button").
- Only discuss topics related to this management system or project management.
""".strip()

CHAT_ROLES = ('user', 'model')


class ChatRelay:
    """Forward one user message plus recent history to the model."""

    def __init__(self, api_key, model='gemini-2.0-flash',
                 base_url='https://generativelanguage.googleapis.com/v1beta',
                 history_limit=10, max_output_tokens=500, timeout=30, session=None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip('/')
        self.history_limit = history_limit
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        # Without an injected session each reply is a one-off requests.post
        self.session = session

    @classmethod
    def from_settings(cls):
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_API_BASE_URL,
            history_limit=settings.CHAT_HISTORY_LIMIT,
            max_output_tokens=settings.CHAT_MAX_OUTPUT_TOKENS,
            timeout=settings.CHAT_TIMEOUT_SECONDS,
        )

    @property
    def endpoint(self):
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, message, history=None):
        turns = list(history or [])
        if self.history_limit:
            turns = turns[-self.history_limit:]
        else:
            turns = []
        contents = [
            {'role': turn['role'], 'parts': [{'text': part['text']} for part in turn['parts']]}
            for turn in turns
        ]
        contents.append({'role': 'user', 'parts': [{'text': message}]})
        return {
            'systemInstruction': {'parts': [{'text': SYSTEM_PROMPT}]},
            'contents': contents,
            'generationConfig': {'maxOutputTokens': self.max_output_tokens},
        }

    def reply(self, message, history=None):
        if not self.api_key:
            raise errors.ConfigError('Chat assistant API key is missing in server configuration')

        payload = self.build_payload(message, history)
        logger.info("Relaying chat message to %s (%d turns)", self.model, len(payload['contents']))
        try:
            response = (self.session or requests).post(
                self.endpoint,
                json=payload,
                headers={'x-goog-api-key': self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            logger.error("Chat upstream request failed: %s", exc)
            raise errors.UpstreamError('Failed to get AI response', details=str(exc)) from exc
        except ValueError as exc:
            raise errors.UpstreamError('Failed to get AI response', details='Upstream returned invalid JSON') from exc

        text = extract_text(body)
        if not text:
            raise errors.UpstreamError('Failed to get AI response', details='Upstream returned no text')
        return {'text': text}


def extract_text(body):
    """Join the text parts of the first candidate in a generateContent response."""
    candidates = body.get('candidates') or []
    if not candidates:
        return ''
    parts = (candidates[0].get('content') or {}).get('parts') or []
    return ''.join(part.get('text', '') for part in parts if isinstance(part, dict))
