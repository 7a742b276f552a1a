"""
Service-wide constants
"""

SERVICE_NAME = "resourceflow-capacity"
SYSTEM_CREDIT = "ResourceFlow planning dashboard - capacity engine"

# Months are 1-12 (datetime convention); short labels used in user-facing messages
MONTH_LABELS = [
    "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
    "Jul", "Ago", "Set", "Out", "Nov", "Dez",
]


def month_label(month: int) -> str:
    """Short Portuguese label for a 1-based month"""
    return MONTH_LABELS[month - 1]
