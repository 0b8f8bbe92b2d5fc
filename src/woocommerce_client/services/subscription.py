"""
Subscription endpoints and the notes and orders nested under them
(WooCommerce Subscriptions)
"""

from ..models import Order, Subscription, SubscriptionNote
from .base import ResourceService, SubscriptionChildService


class SubscriptionService(ResourceService):
    base_path = "subscriptions"
    model = Subscription


class SubscriptionNoteService(SubscriptionChildService):
    base_path = "subscriptions/{subscription_id}/notes"
    model = SubscriptionNote


class SubscriptionOrderService(SubscriptionChildService):
    """Orders (parent, renewal, resubscribe) belonging to a subscription"""
    base_path = "subscriptions/{subscription_id}/orders"
    model = Order
