"""
Ollama API Client

Ollama exposes an OpenAI-compatible API under /v1, so we use the openai
library pointed at the local server.

- Single synchronous completion per chat message (no streaming, no retries)
- Explicit timeout: a stuck model surfaces as 503 instead of hanging the request
- The model is told to stay on career and education topics
"""
import logging
import re

import openai
from openai import OpenAI

from career_advisor.core.config import Settings
from career_advisor.core.errors import UpstreamError, UpstreamRateLimited, UpstreamUnavailable

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a career and education advisor AI assistant. Your role is to:
1. Provide guidance on career paths and educational choices
2. Help with university applications and requirements
3. Give advice on academic performance and improvement
4. Suggest relevant courses and programs
5. Help with study strategies and time management
6. Provide information about different career fields and their requirements

You should NOT:
1. Answer questions unrelated to education or career
2. Provide medical, legal, or financial advice
3. Make decisions for the user
4. Share personal opinions or biases

If asked about topics outside education and career, respond with:
"I can only help with career and education-related questions. Please ask me about your academic goals, career choices, or educational planning."

Always maintain a professional, supportive tone and focus on providing factual, helpful information."""

# Llama/Mistral control tokens that sometimes leak into the completion
_CONTROL_TOKENS = re.compile(r"</?s>|\[/?INST\]")


def clean_response(text: str) -> str:
    return _CONTROL_TOKENS.sub("", text or "").strip()


class OllamaClient:
    """
    Wrapper for the local Ollama server.
    """

    def __init__(self, settings: Settings, client: OpenAI = None):
        self.client = client or OpenAI(
            api_key=settings.ollama_api_key,
            base_url=settings.ollama_base_url,
            timeout=settings.ollama_timeout_seconds,
            max_retries=0
        )
        self.model = settings.ollama_model

    def _call_api(self, system_prompt: str, user_content: str, max_tokens: int = 1000) -> str:
        """
        Internal method to call the chat completions endpoint.
        Returns raw text response; openai exceptions propagate.
        """
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content}
            ],
            max_tokens=max_tokens,
            temperature=0.7,
            top_p=0.9,
            stop=["</s>", "[INST]"]
        )
        return response.choices[0].message.content

    def chat(self, message: str) -> str:
        """
        Get the advisor's answer to a single user message.

        Raises:
            UpstreamUnavailable: Ollama unreachable, timed out or refused the key
            UpstreamRateLimited: Ollama answered 429
            UpstreamError: any other failure, including an empty completion
        """
        logger.debug("Sending request to Ollama (model=%s)", self.model)
        try:
            raw = self._call_api(SYSTEM_PROMPT, message)
        except openai.APIConnectionError as e:
            # Includes APITimeoutError
            logger.error("Ollama unreachable: %s", e)
            raise UpstreamUnavailable()
        except openai.RateLimitError as e:
            logger.warning("Ollama rate limited: %s", e)
            raise UpstreamRateLimited()
        except openai.AuthenticationError as e:
            logger.error("Ollama rejected the API key: %s", e)
            raise UpstreamUnavailable("AI service unavailable: invalid API key")
        except openai.APIError as e:
            logger.error("Ollama API error: %s", e)
            raise UpstreamError(f"AI service error: {e.message}")

        cleaned = clean_response(raw)
        if not cleaned:
            raise UpstreamError("AI service error: No response content received from Ollama")
        return cleaned

    def test_connection(self) -> bool:
        """Test if Ollama is reachable"""
        try:
            self.client.models.list()
            return True
        except openai.OpenAIError as e:
            logger.warning("Ollama connection failed: %s", e)
            return False
