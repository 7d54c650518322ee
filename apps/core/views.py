import logging
from datetime import timedelta

from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods

from apps.projects.services.project_service import ProjectService
from .forms import ProfileForm, SubscribeForm
from .http import api_login_required, form_errors, json_body
from .models import UserProfile
from .services import DashboardService

logger = logging.getLogger(__name__)

# Długość subskrypcji w dniach (miesięczna / roczna)
SUBSCRIPTION_DAYS = {False: 30, True: 365}


def _profile_for(user):
    # Starsi użytkownicy mogą nie mieć profilu (sprzed sygnału)
    profile, _ = UserProfile.objects.get_or_create(user=user)
    return profile


def user_to_dict(user) -> dict:
    profile = _profile_for(user)
    project = ProjectService().get_snapshot(user.id)
    return {
        'id': user.id,
        'email': user.email,
        'username': user.username,
        'name': user.first_name,
        'phone': profile.phone,
        'inn': profile.inn,
        'ogrn': profile.ogrn,
        'is_premium': profile.is_premium,
        'project': project.to_dict() if project else None,
    }


@require_http_methods(["GET"])
@api_login_required
def dashboard_view(request):
    data = DashboardService().build(request.user.id, today=timezone.localdate())
    return JsonResponse(data)


@require_http_methods(["GET", "PUT"])
@api_login_required
@json_body
def profile_view(request):
    if request.method == "PUT":
        form = ProfileForm(data=request.json)
        if not form.is_valid():
            return form_errors(form)

        # Aktualizujemy tylko pola obecne w żądaniu
        data = {k: v for k, v in form.cleaned_data.items() if k in request.json}
        user = request.user
        if 'name' in data:
            user.first_name = data.pop('name')
            user.save(update_fields=['first_name'])

        if data:
            profile = _profile_for(user)
            for field, value in data.items():
                setattr(profile, field, value)
            profile.save()

    return JsonResponse({'user': user_to_dict(request.user)})


@require_http_methods(["POST"])
@api_login_required
@json_body
def premium_subscribe_view(request):
    """Włącza premium (bez płatności) i zwraca okno subskrypcji."""
    form = SubscribeForm(data=request.json)
    if not form.is_valid():
        return form_errors(form)

    profile = _profile_for(request.user)
    profile.is_premium = True
    profile.save(update_fields=['is_premium', 'updated_at'])

    is_annual = form.cleaned_data['is_annual']
    starts_at = timezone.now()
    expires_at = starts_at + timedelta(days=SUBSCRIPTION_DAYS[is_annual])
    logger.info("User %s subscribed to %s (%s)", request.user.id, form.cleaned_data['tier_id'],
                'annual' if is_annual else 'monthly')

    return JsonResponse({
        'success': True,
        'subscription': {
            'tier_id': form.cleaned_data['tier_id'],
            'is_annual': is_annual,
            'starts_at': starts_at.isoformat(),
            'expires_at': expires_at.isoformat(),
        },
    })


@require_http_methods(["POST"])
@api_login_required
def premium_cancel_view(request):
    profile = _profile_for(request.user)
    profile.is_premium = False
    profile.save(update_fields=['is_premium', 'updated_at'])
    logger.info("User %s cancelled premium", request.user.id)
    return JsonResponse({'success': True, 'is_premium': False})
