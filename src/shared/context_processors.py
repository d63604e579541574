from django.conf import settings


def site_contact(request):
    return {
        "site_contact": {
            "email": settings.CONTACT_EMAIL,
            "phone": settings.CONTACT_PHONE,
            "whatsapp": settings.CONTACT_WHATSAPP,
        }
    }
