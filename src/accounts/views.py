import logging

from django.conf import settings
from django.contrib.auth import get_user_model, authenticate, login, logout
from django.contrib.auth.tokens import PasswordResetTokenGenerator
from django.utils import timezone
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_encode, urlsafe_base64_decode
from django.utils.translation import gettext as _
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken

from src.shared.exceptions import NotFoundError, UnauthenticatedError, ValidationError
from .models import Profile, get_profile
from .serializers import (
    RegisterSerializer, LoginSerializer, ProfileSerializer,
    PasswordResetRequestSerializer, PasswordResetConfirmSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()

class EmailConfirmationTokenGenerator(PasswordResetTokenGenerator):
    key_salt = "src.accounts.views.EmailConfirmationTokenGenerator"

token_generator = PasswordResetTokenGenerator()
confirmation_token_generator = EmailConfirmationTokenGenerator()

def _uid_encode(pk: int) -> str:
    return urlsafe_base64_encode(force_bytes(pk))

def _uid_decode(uid: str) -> int:
    return int(urlsafe_base64_decode(uid).decode("utf-8"))

def _user_from_uid(uid: str):
    try:
        return User.objects.get(pk=_uid_decode(uid))
    except (ValueError, TypeError, User.DoesNotExist):
        return None

def _confirmation_link(user) -> str:
    uid = _uid_encode(user.pk)
    token = confirmation_token_generator.make_token(user)
    return f"{settings.BACKEND_URL}/api/accounts/verify-email/?uid={uid}&token={token}"

def _password_reset_link(user) -> str:
    uid = _uid_encode(user.pk)
    token = token_generator.make_token(user)
    return f"{settings.FRONTEND_URL}/reset-password?uid={uid}&token={token}"

def _send(subject, template, context, to, request=None):
    html = render_to_string(template, context, request=request)
    text = "\n".join(f"{v}" for k, v in context.items() if k.endswith("_link"))
    msg = EmailMultiAlternatives(subject, text, settings.DEFAULT_FROM_EMAIL, to)
    msg.attach_alternative(html, "text/html")
    msg.send(fail_silently=True)

def _session_payload(user):
    refresh = RefreshToken.for_user(user)
    profile = get_profile(user)
    return {
        "access": str(refresh.access_token),
        "refresh": str(refresh),
        "user": ProfileSerializer(profile).data if profile else {"id": user.id, "email": user.email},
    }

class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered %s account %s", user.profile.role, user.pk)
        _send(
            _("Confirm your email"),
            "emails/confirm_email.html",
            {"user": user, "confirmation_link": _confirmation_link(user)},
            [user.email],
            request=request._request,
        )
        return Response(ProfileSerializer(user.profile).data, status=status.HTTP_201_CREATED)

class VerifyEmailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        uid = request.query_params.get("uid")
        token = request.query_params.get("token")
        if not uid or not token:
            raise ValidationError(_("Invalid link."))
        user = _user_from_uid(uid)
        if user is None:
            raise NotFoundError(_("User not found."))
        if not confirmation_token_generator.check_token(user, token):
            raise ValidationError(_("The token is invalid or has expired."))
        Profile.objects.filter(user=user, email_confirmed_at__isnull=True).update(email_confirmed_at=timezone.now())
        return Response({"detail": _("Email confirmed.")})

class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = authenticate(
            request._request,
            username=serializer.validated_data["email"].strip().lower(),
            password=serializer.validated_data["password"],
        )
        if user is None:
            raise UnauthenticatedError(_("Invalid email or password."))
        login(request._request, user)
        return Response(_session_payload(user))

class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        logout(request._request)
        return Response({"success": True})

class PasswordResetRequestView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = PasswordResetRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"].strip().lower()
        user = User.objects.filter(email=email).first()
        if user is not None:
            _send(
                _("Reset your password"),
                "emails/password_reset.html",
                {"user": user, "reset_link": _password_reset_link(user)},
                [email],
                request=request._request,
            )
        return Response({"detail": _("If the email exists, a message has been sent.")})

class PasswordResetConfirmView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = PasswordResetConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = _user_from_uid(serializer.validated_data["uid"])
        if user is None or not token_generator.check_token(user, serializer.validated_data["token"]):
            raise ValidationError(_("The token is invalid or has expired."))
        user.set_password(serializer.validated_data["new_password"])
        user.save(update_fields=["password"])
        return Response({"detail": _("Password updated.")})

class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def _profile(self, request):
        profile = get_profile(request.user)
        if profile is None:
            profile = Profile.objects.create(user=request.user, email=request.user.email)
        return profile

    def get(self, request):
        return Response(ProfileSerializer(self._profile(request)).data)

    def put(self, request):
        return self._update(request, partial=False)

    def patch(self, request):
        return self._update(request, partial=True)

    def _update(self, request, partial):
        serializer = ProfileSerializer(self._profile(request), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)
