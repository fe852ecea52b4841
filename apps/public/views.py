import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.generic import TemplateView, View

from config.constants import (
    MSG_APPOINTMENT_SUCCESS, MSG_CLASS_BOOKING_SUCCESS, MSG_CONTACT_INVALID, MSG_CONTACT_SUCCESS,
    MSG_GENERIC_ERROR,
)
from . import content
from .forms import AppointmentForm, GeneralContactForm, PrepClassBookingForm
from .services import LeadService

logger = logging.getLogger("apps.public")


class ContentPageView(TemplateView):
    """A static page whose context comes straight from public.content."""
    extra_context_names = ()

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        for name in self.extra_context_names:
            context[name.lower()] = getattr(content, name)
        return context


class HomeView(ContentPageView):
    template_name = 'public/home.html'
    extra_context_names = ('TESTIMONIALS', 'SERVICES', 'COUNTRIES', 'UPCOMING_INTAKES')


class AboutView(ContentPageView):
    template_name = 'public/about.html'
    extra_context_names = ('TEAM',)


class ServicesView(ContentPageView):
    template_name = 'public/services.html'
    extra_context_names = ('SERVICES',)


class CountryGuidesView(ContentPageView):
    template_name = 'public/countries.html'
    extra_context_names = ('COUNTRIES', 'UPCOMING_INTAKES')


class CountryDetailView(TemplateView):
    template_name = 'public/country_detail.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        country = content.get_country(kwargs['slug'])
        if country is None:
            raise Http404("Unknown country")
        context['country'] = country
        context['universities'] = content.UNIVERSITY_LIST.get(country['name'], [])
        context['intake'] = next((i for i in content.UPCOMING_INTAKES if i['slug'] == country['slug']), None)
        return context


class FAQView(ContentPageView):
    template_name = 'public/faq.html'
    extra_context_names = ('FAQ',)


class InterviewQAView(ContentPageView):
    template_name = 'public/interview_qa.html'
    extra_context_names = ('INTERVIEW_QA',)


class EnglishTestGuideView(ContentPageView):
    template_name = 'public/english_test_guide.html'
    extra_context_names = ('ENGLISH_TESTS_COMPARISON',)


class PreDepartureToolkitView(ContentPageView):
    template_name = 'public/pre_departure_toolkit.html'
    extra_context_names = ('PRE_DEPARTURE_TOOLKIT',)


class SuccessStoriesView(ContentPageView):
    template_name = 'public/success_stories.html'
    extra_context_names = ('VISA_SUCCESSES', 'TESTIMONIALS')


class ConnectView(ContentPageView):
    template_name = 'public/connect.html'
    extra_context_names = ('SOCIAL_PLATFORMS',)


class LeadFormView(View):
    """GET shows the form; POST validates, saves and redirects back with a flash."""
    form_class = None
    template_name = None
    success_message = None
    success_url_name = None

    def get(self, request):
        return render(request, self.template_name, {'form': self.form_class()})

    def post(self, request):
        form = self.form_class(request.POST)
        if not form.is_valid():
            messages.error(request, MSG_CONTACT_INVALID)
            return render(request, self.template_name, {'form': form})

        try:
            self.save(form)
        except DatabaseError:
            logger.exception(f"{self.__class__.__name__}: could not save submission")
            messages.error(request, MSG_GENERIC_ERROR)
            return render(request, self.template_name, {'form': form})

        messages.success(request, self.success_message)
        return redirect(self.success_url_name)

    def save(self, form):
        raise NotImplementedError


class ContactView(LeadFormView):
    form_class = GeneralContactForm
    template_name = 'public/contact.html'
    success_message = MSG_CONTACT_SUCCESS
    success_url_name = 'contact'

    def save(self, form):
        return LeadService.create_inquiry(form.cleaned_data)


class PrepClassBookingView(LeadFormView):
    form_class = PrepClassBookingForm
    template_name = 'public/prep_classes.html'
    success_message = MSG_CLASS_BOOKING_SUCCESS
    success_url_name = 'prep-classes'

    def save(self, form):
        booking = form.save()
        logger.info(f"Class booking {booking.pk} for {booking.preferred_test}")
        return booking


class AppointmentView(LeadFormView):
    form_class = AppointmentForm
    template_name = 'public/book_appointment.html'
    success_message = MSG_APPOINTMENT_SUCCESS
    success_url_name = 'book-appointment'

    def save(self, form):
        return LeadService.book_appointment(form.cleaned_data)
