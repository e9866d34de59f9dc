"""
Dashboard app views

JSON endpoint behind the project form inputs.
"""
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_protect
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.client import get_data_service
from .permissions import HasAdminSession
from .serializers import ProjectDraftFieldSerializer
from .services import ProjectEditor


@method_decorator(csrf_protect, name='dispatch')
class ProjectDraftView(APIView):
    """
    Update one field of a project form as the admin types.

    POST /admin/api/project-draft/ - {"field", "value", "target"}

    Comma-separated fields come back parsed into lists. Requests must carry
    the CSRF token of the dashboard page.
    """

    permission_classes = [HasAdminSession]

    def post(self, request):
        serializer = ProjectDraftFieldSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        editor = ProjectEditor.from_session(
            request.session,
            get_data_service(),
            access_token=request.admin_session.access_token,
        )
        try:
            draft = editor.set_draft_field(
                serializer.validated_data['field'],
                serializer.validated_data['value'],
                target=serializer.validated_data['target'],
            )
        except ValueError as exc:
            return Response({'detail': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        editor.save_to(request.session)
        return Response(draft)
