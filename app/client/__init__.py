from .waitlist_flow import FormStep, WaitlistFlow, WaitlistFlowError

__all__ = ["FormStep", "WaitlistFlow", "WaitlistFlowError"]
