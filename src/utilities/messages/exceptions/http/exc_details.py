def http_404_roadmap_details(slug: str) -> str:
    return f"Roadmap with slug `{slug}` does not exist!"


def http_404_phase_details(slug: str, phase_id: str) -> str:
    return f"Phase `{phase_id}` does not exist in roadmap `{slug}`!"


def http_404_topic_details(slug: str, phase_id: str, topic_id: str) -> str:
    return f"Topic `{topic_id}` does not exist in phase `{phase_id}` of roadmap `{slug}`!"


def http_400_invalid_chat_payload_details() -> str:
    return "Invalid payload format. Expected Base64."


def http_400_invalid_chat_request_details() -> str:
    return "Invalid request. Please try again."


def http_503_chat_not_configured_details() -> str:
    return "The assistant is not configured yet. Please contact the administrator."


def http_500_chat_failed_details() -> str:
    return "Something went wrong. Please try again later."
