import json
import logging

from django.contrib import messages
from django.http import HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.utils.text import slugify
from django.views.generic import TemplateView, View

from config.constants import CHAT_HISTORY_MAX_TURNS, MSG_ASSISTANT_UNAVAILABLE, MSG_GENERIC_ERROR, MSG_SOP_NOT_GENERATED
from .checklist import get_checklist
from .docx_export import SopDocxService
from .forms import ChatForm, DocumentChecklistForm, PathwayPlannerForm, SopGeneratorForm, TestAdvisorForm
from .services import AssistantService
from .sop import generate_sop

logger = logging.getLogger("apps.assistants")

SOP_SESSION_KEY = 'sop_text'
SOP_NAME_SESSION_KEY = 'sop_full_name'
DOCX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'


class AssistantsHomeView(TemplateView):
    template_name = 'assistants/home.html'


class ToolFormView(View):
    """
    GET shows an empty form; POST validates it and renders the result on the
    same page. htmx requests get only the result fragment.
    """
    form_class = None
    template_name = None
    partial_template_name = None
    result_name = 'result'

    def get(self, request):
        return render(request, self.template_name, {'form': self.form_class()})

    def post(self, request):
        form = self.form_class(request.POST)
        context = {'form': form}
        if form.is_valid():
            result, error = self.run(form.cleaned_data)
            if error:
                messages.error(request, MSG_GENERIC_ERROR)
            context[self.result_name] = result

        template = self.template_name
        if request.headers.get('HX-Request') and self.partial_template_name:
            template = self.partial_template_name
            context['partial'] = True
        return render(request, template, context)

    def run(self, data):
        raise NotImplementedError


class SopGeneratorView(ToolFormView):
    form_class = SopGeneratorForm
    template_name = 'assistants/sop_generator.html'
    result_name = 'sop'

    def run(self, data):
        sop = generate_sop(data)
        self.request.session[SOP_SESSION_KEY] = sop
        self.request.session[SOP_NAME_SESSION_KEY] = data['full_name']
        logger.info(f"SOP generated for {data['target_country']} / {data['target_education_level']}")
        return sop, None


class SopDownloadView(View):

    def get(self, request):
        sop = request.session.get(SOP_SESSION_KEY)
        if not sop:
            messages.error(request, MSG_SOP_NOT_GENERATED)
            return redirect('sop-generator')

        buffer = SopDocxService().create_docx(sop)
        name = slugify(request.session.get(SOP_NAME_SESSION_KEY, '')) or 'applicant'
        response = HttpResponse(buffer.getvalue(), content_type=DOCX_CONTENT_TYPE)
        response['Content-Disposition'] = f'attachment; filename="sop-{name}.docx"'
        return response


class DocumentChecklistView(ToolFormView):
    form_class = DocumentChecklistForm
    template_name = 'assistants/document_checklist.html'
    partial_template_name = 'assistants/_checklist.html'
    result_name = 'checklist'

    def run(self, data):
        return get_checklist(data['education_level'], data['destination']), None


class TestAdvisorView(ToolFormView):
    form_class = TestAdvisorForm
    template_name = 'assistants/test_advisor.html'
    partial_template_name = 'assistants/_advice.html'
    result_name = 'advice'

    def run(self, data):
        return AssistantService(actor=self.request.user).advise_test(data)


class PathwayPlannerView(ToolFormView):
    form_class = PathwayPlannerForm
    template_name = 'assistants/pathway_planner.html'
    partial_template_name = 'assistants/_pathway.html'
    result_name = 'plan'

    def run(self, data):
        return AssistantService(actor=self.request.user).plan_pathway(data)


class ChatbotView(View):
    """JSON endpoint behind the chat widget: {"query": ..., "history": [...]}."""

    def post(self, request):
        try:
            payload = json.loads(request.body or b'{}')
        except ValueError:
            return JsonResponse({'error': "Invalid JSON body."}, status=400)
        if not isinstance(payload, dict):
            return JsonResponse({'error': "Invalid JSON body."}, status=400)

        form = ChatForm({'query': payload.get('query', '')})
        if not form.is_valid():
            return JsonResponse({'error': form.errors.get_json_data()}, status=400)

        history = payload.get('history')
        if not isinstance(history, list):
            history = []
        history = [turn for turn in history if isinstance(turn, dict)][-CHAT_HISTORY_MAX_TURNS:]

        reply, error = AssistantService(actor=request.user).chat(form.cleaned_data['query'], history)
        if error:
            return JsonResponse({'response': MSG_ASSISTANT_UNAVAILABLE, 'form': None}, status=503)
        return JsonResponse(reply)
