import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


def _recipient_for(inquiry):
    prop = inquiry.property
    owner = getattr(prop, "owner", None) if prop else None
    email = (getattr(owner, "email", "") or "").strip()
    return email or settings.CONTACT_EMAIL


def notify_new_inquiry(inquiry, request=None) -> bool:
    """Mail the property owner (or the site contact address) about a new inquiry.

    Delivery problems never fail the request that created the inquiry.
    """
    to_email = _recipient_for(inquiry)
    if not to_email:
        return False
    ctx = {"inquiry": inquiry, "property": inquiry.property, "room": inquiry.room}
    label = inquiry.property.name_es if inquiry.property else inquiry.get_type_display()
    subject = f"Nueva solicitud: {label} (#{inquiry.pk})"
    text = (
        f"{label}\n"
        f"Nombre: {inquiry.name}\nEmail: {inquiry.email}\nTeléfono: {inquiry.phone or ''}\n\n"
        f"Mensaje:\n{inquiry.message}"
    )
    html = render_to_string("emails/new_inquiry.html", ctx, request=request)
    msg = EmailMultiAlternatives(subject, text, settings.DEFAULT_FROM_EMAIL, [to_email])
    msg.attach_alternative(html, "text/html")
    msg.reply_to = [inquiry.email]
    sent = msg.send(fail_silently=True)
    if not sent:
        logger.warning("Inquiry %s notification to %s was not delivered", inquiry.pk, to_email)
    return bool(sent)
