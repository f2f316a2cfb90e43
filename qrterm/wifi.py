"""
Build the payload phones understand as a "join this Wi-Fi network" code.
"""

from __future__ import annotations

SECURITY_TYPES = ("WPA", "WEP", "nopass")
_SPECIAL = r'\;,":'


def escape(value: str) -> str:
    return "".join("\\" + ch if ch in _SPECIAL else ch for ch in value)


def wifi_payload(
    ssid: str,
    password: str = "",
    security: str = "WPA",
    hidden: bool = False,
) -> str:
    """
    Return ``WIFI:S:<ssid>;T:<security>;P:<password>;;``.

    An empty ``security`` means WPA. With ``nopass`` the password field is
    left out.
    """
    if not ssid:
        raise ValueError("Wi-Fi network name must not be empty")

    security = security or "WPA"
    matches = [kind for kind in SECURITY_TYPES if kind.lower() == security.lower()]
    if not matches:
        raise ValueError(
            f"Unknown Wi-Fi security {security!r}, expected one of {', '.join(SECURITY_TYPES)}"
        )
    security = matches[0]

    fields = [f"S:{escape(ssid)}", f"T:{security}"]
    if security != "nopass":
        fields.append(f"P:{escape(password)}")
    if hidden:
        fields.append("H:true")
    return "WIFI:" + "".join(field + ";" for field in fields) + ";"
