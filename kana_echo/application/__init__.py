# Application Layer
# =================
# Use cases and orchestration, no business rules:
# - reply_pipeline: token -> parse -> filter for one sentence
# - dispatcher: runs the pipeline for every text message of a webhook call
from .reply_pipeline import build_reply
from .dispatcher import DispatchSummary, dispatch_messages

__all__ = ["build_reply", "DispatchSummary", "dispatch_messages"]
