from .waitlist_model import WaitlistEntry, WaitlistStatus

__all__ = ["WaitlistEntry", "WaitlistStatus"]
