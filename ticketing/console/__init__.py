from .dashboard import OfferDashboard
from .menu import OfferMenu

__all__ = ['OfferDashboard', 'OfferMenu']
