"""Default-export example: a factory function registered function-style."""


def make_send_email(greeter, userStore):
    """Build a send_email callable from injected services."""

    def send_email(email: str) -> dict:
        name = userStore.get(email) or email
        return {"to": email, "body": greeter.greet(name)}

    return send_email


default = make_send_email
