from ignitai.models.application import Application
from ignitai.models.certificate import Certificate
from ignitai.models.feedback import Feedback

__all__ = [
    "Application",
    "Certificate",
    "Feedback",
]
