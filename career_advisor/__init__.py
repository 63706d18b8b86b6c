"""
Career Advisor
Backend for a student career-advisory dashboard.

Architecture:
- MongoDB: one document per account (credentials + profile)
- JWT: stateless bearer tokens, 1 hour lifetime
- Ollama: local model behind the career-advice chat
"""

__version__ = "1.0.0"
