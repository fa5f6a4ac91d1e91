"""
Boundary between the authorization core and the services: logs a denial
and raises the matching domain error.
"""
import logging

from taskhub.domain.authorization import Decision, Denied, raise_for_decision

logger = logging.getLogger("uvicorn.error")


def enforce(decision: Decision, user_id: str, collection_id: int) -> None:
    if isinstance(decision, Denied):
        logger.warning(
            "[authz] denied user=%s collection=%s kind=%s: %s",
            user_id, collection_id, decision.kind.value, decision.reason,
        )
    raise_for_decision(decision)
