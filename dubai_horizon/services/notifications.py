# dubai_horizon/services/notifications.py
import logging

import requests

from dubai_horizon.config import get_booking_webhook_url
from dubai_horizon.models.booking import Booking

logger = logging.getLogger(__name__)


def booking_webhook_params(booking: Booking) -> dict:
    return {
        "name": booking.name,
        "phone": booking.phone,
        "travelDate": booking.travel_date.isoformat(),
        "totalCost": f"{booking.total_cost:.2f}",
        "currency": booking.currency,
        "bookedItems": ", ".join(f"{item.name} (Qty: {item.quantity})" for item in booking.items),
        "status": booking.status.value,
    }


def notify_booking_created(booking: Booking) -> bool:
    """Send the booking to the configured webhook.

    Failures are logged and reported as False; the booking itself is
    already stored by the time this runs.
    """
    url = get_booking_webhook_url()
    if not url:
        return False
    try:
        response = requests.get(url, params=booking_webhook_params(booking), timeout=10)
    except requests.RequestException as e:
        logger.error("Error sending booking %s to webhook: %s", booking.id, e)
        return False
    if not response.ok:
        logger.error("Booking webhook error: %s %s", response.status_code, response.text)
        return False
    logger.info("Booking %s sent to webhook", booking.id)
    return True
