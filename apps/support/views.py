import logging

from django.db import transaction
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.http import api_login_required, form_errors, json_body, json_error
from apps.core.ratelimit import limiter_for
from .forms import SupportMessageForm
from .models import SupportMessage
from .responses import auto_response

logger = logging.getLogger(__name__)


def message_to_dict(message: SupportMessage) -> dict:
    return {
        'id': message.id,
        'text': message.text,
        'sender': message.sender,
        'created_at': message.created_at.isoformat(),
    }


@require_http_methods(["GET", "POST", "DELETE"])
@api_login_required
@json_body
def support_view(request):
    """Czat z pomocą techniczną: historia (GET), nowa wiadomość + autoodpowiedź (POST), czyszczenie (DELETE)."""
    messages = SupportMessage.objects.filter(user=request.user)

    if request.method == "DELETE":
        deleted, _ = messages.delete()
        logger.info("Support history cleared for user %s (%s messages)", request.user.id, deleted)
        return JsonResponse({'success': True})

    if request.method == "POST":
        # 1. Limit zapytań na użytkownika
        if not limiter_for('support').allow(request.user.id):
            return json_error('Too many requests', status=429)

        # 2. Walidacja treści
        form = SupportMessageForm(data=request.json)
        if not form.is_valid():
            return form_errors(form)
        text = form.cleaned_data['text']

        # 3. Wiadomość użytkownika + automatyczna odpowiedź
        with transaction.atomic():
            user_message = SupportMessage.objects.create(
                user=request.user, text=text, sender=SupportMessage.SenderChoices.USER,
            )
            support_message = SupportMessage.objects.create(
                user=request.user, text=auto_response(text), sender=SupportMessage.SenderChoices.SUPPORT,
            )

        return JsonResponse({
            'user_message': message_to_dict(user_message),
            'support_message': message_to_dict(support_message),
        }, status=201)

    return JsonResponse({'messages': [message_to_dict(m) for m in messages.order_by('created_at', 'id')]})
