"""Python client for the waitlist API and its signup form."""

from waitlist.client.api import WaitlistClient
from waitlist.client.form import FormState, SignupForm

__all__ = [
    "FormState",
    "SignupForm",
    "WaitlistClient",
]
