from .context import TenantContext, TenantKey
from .credentials import issue_credential, resolve_credential, bearer_token
from .policy import Action, ResourceKind, Reason, Decision, decide, authorize

__all__ = [
    "TenantContext", "TenantKey",
    "issue_credential", "resolve_credential", "bearer_token",
    "Action", "ResourceKind", "Reason", "Decision", "decide", "authorize",
]
