from django.conf import settings
from django.shortcuts import redirect


def index(request):
    # The portal UI is a separate frontend; the API root just points there
    return redirect(settings.FRONTEND_URL)
