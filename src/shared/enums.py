from django.db.models import TextChoices


class ProfileRole(TextChoices):
    OWNER = "owner", "Owner"
    STUDENT = "student", "Student"


class Zone(TextChoices):
    TRES_CRUCES = "tres-cruces", "Tres Cruces"
    CENTRO = "centro", "Centro"
    CHOLULA = "cholula", "Cholula"


class University(TextChoices):
    BUAP = "BUAP", "BUAP"
    CENTRO = "Centro", "Centro"
    UDLAP = "UDLAP", "UDLAP"


class RoomType(TextChoices):
    PRIVATE = "private", "Private"
    SHARED = "shared", "Shared"


class BathroomType(TextChoices):
    PRIVATE = "private", "Private"
    SHARED = "shared", "Shared"


class BookingStatus(TextChoices):
    UPCOMING = "upcoming", "Upcoming"
    ACTIVE = "active", "Active"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


class InquiryType(TextChoices):
    CONTACT = "contact", "Contact"
    APPLICATION = "application", "Application"
    LIST_PROPERTY = "list-property", "List property"


class InquiryStatus(TextChoices):
    NEW = "new", "New"
    CONTACTED = "contacted", "Contacted"
    DOCUMENTS = "documents", "Documents"
    REVIEWING = "reviewing", "Reviewing"
    APPROVED = "approved", "Approved"
    PAYMENT = "payment", "Payment"
    CONFIRMED = "confirmed", "Confirmed"
    REJECTED = "rejected", "Rejected"
    ARCHIVED = "archived", "Archived"
