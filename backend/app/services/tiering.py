"""Contact tiering against the configured target companies and roles."""

GOLD = "GOLD"
SILVER = "SILVER"
STANDARD = "STANDARD"


def contact_tier(contact, preferences) -> str:
    """Classify a contact as GOLD, SILVER or STANDARD.

    Company must equal a target company exactly; role matches when any target role is a
    case-insensitive substring of it. GOLD needs both, SILVER the company only.
    """
    target_companies = [c for c in (preferences.target_companies or []) if c and c.strip()]
    target_roles = [r.strip().lower() for r in (preferences.target_roles or []) if r and r.strip()]

    matches_company = contact.company in target_companies
    role = (contact.role or "").lower()
    matches_role = any(target in role for target in target_roles)

    if matches_company and matches_role:
        return GOLD
    if matches_company:
        return SILVER
    return STANDARD
