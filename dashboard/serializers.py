"""
Dashboard app serializers
"""
from rest_framework import serializers

from .services import ProjectEditor


class ProjectDraftFieldSerializer(serializers.Serializer):
    """
    One keystroke's worth of change to a project form.

    ``target`` selects the add-form draft (``new``) or the project currently
    being edited (``editing``).
    """

    field = serializers.ChoiceField(choices=ProjectEditor.TEXT_FIELDS + ProjectEditor.LIST_FIELDS)
    value = serializers.CharField(allow_blank=True, trim_whitespace=False)
    target = serializers.ChoiceField(choices=['new', 'editing'], default='new')
