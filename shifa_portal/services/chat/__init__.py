"""
Chat assistant module.
"""

from .responder import DialogueResponder, IntentRule, build_rules, respond
from .service import ChatService

__all__ = ["DialogueResponder", "IntentRule", "build_rules", "respond", "ChatService"]
