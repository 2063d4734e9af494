"""Small Block Kit building blocks shared by the reply builders."""


def build_header(text: str) -> dict:
    return {
        "type": "header",
        "text": {
            "type": "plain_text",
            "text": text,
            "emoji": True
        }
    }


def build_divider() -> dict:
    return {"type": "divider"}


def build_button(text: str, action_id: str, value: str) -> dict:
    return {
        "type": "button",
        "text": {"type": "plain_text", "text": text, "emoji": True},
        "value": value,
        "action_id": action_id
    }


def build_plain_text_reply(text: str) -> dict:
    """Plain-text reply used for every not-found outcome."""
    return {
        "type": "plain_text",
        "text": text,
        "emoji": True
    }
