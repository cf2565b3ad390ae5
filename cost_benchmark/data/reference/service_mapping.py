"""Carrier service label to shipping method mapping."""

from enum import Enum


class ShippingMethod(Enum):
    ECONOMY = "Economy"
    GROUND = "Ground"
    EXPRESS = "Express"
    EXPEDITED = "Expedited"
    PRIORITY = "Priority"
    SPECIAL = "Special"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        return self.value


# Maps the "Carrier Service" export value to a shipping method.
# Keys are matched exactly: labels differing only by case are separate entries.
SERVICE_MAPPING = {
    # Economy
    "UPS Worldwide Saver (Duties Not Paid)": ShippingMethod.ECONOMY,
    "UPS SurePost": ShippingMethod.ECONOMY,
    "UPS SUREPOST": ShippingMethod.ECONOMY,
    "DHL International (Duties Not Paid)": ShippingMethod.ECONOMY,
    "DHL International [Route Protection Highly Recommended Not Responsible For Lost Shipment]": ShippingMethod.ECONOMY,
    "USPS First-Class Mail [Order Protection Highly Recommended Not Responsible For Lost Shipment]": ShippingMethod.ECONOMY,
    "USPS First-Class Mail": ShippingMethod.ECONOMY,
    "DHL eCommerce Ground": ShippingMethod.ECONOMY,
    "USPS Parcel Post": ShippingMethod.ECONOMY,

    # Ground
    "UPS Ground [RESA]": ShippingMethod.GROUND,
    "FedEx Home Delivery": ShippingMethod.GROUND,
    "FedEx Ground": ShippingMethod.GROUND,
    "Upgrade to (3-5 Day) DHL Expedited": ShippingMethod.GROUND,

    # Expedited
    "UPS Next Day Air Saver": ShippingMethod.EXPEDITED,
    "FedEx Standard Overnight [RESA]": ShippingMethod.EXPEDITED,
    "FedEx Priority Overnight": ShippingMethod.EXPEDITED,
    "FedEx Standard Overnight (Envelope)": ShippingMethod.EXPEDITED,
    "USPS Express Mail": ShippingMethod.EXPEDITED,
    "FedEx Standard Overnight": ShippingMethod.EXPEDITED,

    # Express
    "UPS Worldwide Express (Duties Not Paid)": ShippingMethod.EXPRESS,
    "FedEx One Rate (Pak) 2-Day [RESA]": ShippingMethod.EXPRESS,
    "FedEx One Rate (Envelope) 2-Day [RESA]": ShippingMethod.EXPRESS,
    "UPS 2nd Day Air": ShippingMethod.EXPRESS,
    "FedEx 2nd Day [RESA]": ShippingMethod.EXPRESS,
    "USPS Priority Mail": ShippingMethod.EXPRESS,

    # Priority
    "FedEx Intl Priority (Envelope) (Duties Not Paid)": ShippingMethod.PRIORITY,
    "USPS Priority Mail International (Duties Not Paid)": ShippingMethod.PRIORITY,
    "FedEx Intl Connect Plus (Duties Not Paid) [RESA]": ShippingMethod.PRIORITY,
    "FedEx 2nd Day": ShippingMethod.PRIORITY,
    "FedEx International Priority (Duties Not Paid)": ShippingMethod.PRIORITY,
    "fedex overnight": ShippingMethod.PRIORITY,
    "FEDEX overnight": ShippingMethod.PRIORITY,

    # Special (jewelry, transfers)
    "FedEx One Rate (Pak) 2-Day [RESA JEWELRY]": ShippingMethod.SPECIAL,
    "Misc Transfer Carrier": ShippingMethod.SPECIAL,

    # Bare carrier names: seen on both domestic and international orders
    "USPS": ShippingMethod.UNKNOWN,
    "usps": ShippingMethod.UNKNOWN,
    "fedex": ShippingMethod.UNKNOWN,
    "FEDEX": ShippingMethod.UNKNOWN,
    "FEDEx": ShippingMethod.UNKNOWN,
    "ups": ShippingMethod.UNKNOWN,
    "UPS": ShippingMethod.UNKNOWN,
}

# Only these methods make it into the report
REPORTED_METHODS = frozenset({ShippingMethod.ECONOMY, ShippingMethod.GROUND})


def get_shipping_method(carrier_service: str) -> ShippingMethod:
    """Map a carrier service label to a shipping method (Unknown if unlisted)."""
    return SERVICE_MAPPING.get(carrier_service, ShippingMethod.UNKNOWN)


def report_shipping_method(shipping_method: ShippingMethod) -> bool:
    return shipping_method in REPORTED_METHODS
