import logging

from common import utils
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.decorators import permission_required
from django.shortcuts import redirect
from django.shortcuts import render
from django.utils.translation import gettext as _

from .forms import GoogleAdsSettingsForm


LOGGER = logging.getLogger(__name__)


@login_required
@permission_required("administration.change_settings", raise_exception=True)
def settings_edit(request):
    config = utils.StoredConfiguration.load()
    form = GoogleAdsSettingsForm(request.POST or None, config=config)
    if form.is_valid():
        form.save()
        LOGGER.info(
            "Google Ads settings changed by %s: %s",
            request.user.get_username(),
            form.cleaned_data,
        )
        messages.success(request, _("The configuration options have been saved."))
        return redirect("googleads:settings")
    return render(request, "googleads/settings_form.html", {"form": form})
