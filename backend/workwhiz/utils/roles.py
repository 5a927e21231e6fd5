"""Role resolution from the request host."""

from ..core.config import settings
from ..domain.roles import Role


def _subdomain_roles() -> dict[str, Role]:
    return {
        settings.ADMIN_SUBDOMAIN.lower(): Role.ADMIN,
        settings.EMPLOYER_SUBDOMAIN.lower(): Role.EMPLOYER,
        settings.CANDIDATE_SUBDOMAIN.lower(): Role.CANDIDATE,
    }


def get_user_role(host: str | None) -> Role | None:
    """Determine the user role from the request host.

    The first label of the host selects the role: ``admin.`` hosts are the
    admin portal, ``employer.`` hosts the employer portal and ``www.`` hosts
    the candidate site. Ports are ignored and matching is case-insensitive.

    Args:
        host: Value of the Host header (may include a port)

    Returns:
        Matching Role, or None for empty or unrecognised hosts

    Examples:
        >>> get_user_role("admin.dev.example.com")
        <Role.ADMIN: 'admin'>
        >>> get_user_role("employer.localhost:3000")
        <Role.EMPLOYER: 'employer'>
        >>> get_user_role("myadmin.example.com") is None
        True
    """
    if not host or not isinstance(host, str):
        return None

    hostname = host.strip().lower().split(":", 1)[0]
    if not hostname or "/" in hostname:
        return None

    labels = hostname.split(".")
    if len(labels) < 2:
        return None

    return _subdomain_roles().get(labels[0])
