"""
Application-wide constants
"""

# Booking statuses
BOOKING_STATUS_PENDING = 'pending'
BOOKING_STATUS_APPROVED = 'approved'
BOOKING_STATUS_REJECTED = 'rejected'

BOOKING_STATUSES = [
    (BOOKING_STATUS_PENDING, 'Pending'),
    (BOOKING_STATUS_APPROVED, 'Approved'),
    (BOOKING_STATUS_REJECTED, 'Rejected'),
]

# Payment statuses
PAYMENT_STATUS_UNPAID = 'unpaid'
PAYMENT_STATUS_PAID = 'paid'
PAYMENT_STATUS_FAILED = 'failed'
PAYMENT_STATUS_REFUNDED = 'refunded'

PAYMENT_STATUSES = [
    (PAYMENT_STATUS_UNPAID, 'Unpaid'),
    (PAYMENT_STATUS_PAID, 'Paid'),
    (PAYMENT_STATUS_FAILED, 'Failed'),
    (PAYMENT_STATUS_REFUNDED, 'Refunded'),
]

# Package pricing modes
PRICING_FIXED = 'fixed'
PRICING_PER_PERSON = 'perPerson'
PRICING_CUSTOM = 'custom'

PRICING_TYPES = [
    (PRICING_FIXED, 'Fixed'),
    (PRICING_PER_PERSON, 'Per Person'),
    (PRICING_CUSTOM, 'Custom'),
]

# Payment provider events
RAZORPAY_EVENT_PAYMENT_CAPTURED = 'payment.captured'
RAZORPAY_EVENT_PAYMENT_FAILED = 'payment.failed'
RAZORPAY_EVENT_PAYMENT_LINK_PAID = 'payment_link.paid'

# Live broadcast events
BROADCAST_GROUP_BOOKINGS = 'bookings'

EVENT_BOOKING_CREATED = 'bookingCreated'
EVENT_BOOKING_APPROVED = 'bookingApproved'
EVENT_BOOKING_REJECTED = 'bookingRejected'
EVENT_PAYMENT_UPDATE = 'paymentUpdate'
EVENT_PAST_BOOKINGS_DELETED = 'pastBookingsDeleted'

# Email notification types
EMAIL_NEW_BOOKING = 'new_booking'
EMAIL_BOOKING_APPROVED = 'booking_approved'
EMAIL_BOOKING_REJECTED = 'booking_rejected'
