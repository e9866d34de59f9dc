"""
Portfolio app serializers

Read-only serializers for the portfolio snapshot records.
"""
from rest_framework import serializers


class SocialLinksSerializer(serializers.Serializer):
    github = serializers.CharField()
    linkedin = serializers.CharField()
    twitter = serializers.CharField()


class ProfileSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    tagline = serializers.CharField()
    description = serializers.CharField()
    profile_image = serializers.CharField()
    resume_url = serializers.CharField()
    social_links = SocialLinksSerializer()


class SkillSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    level = serializers.IntegerField()
    profile_id = serializers.CharField()


class JourneyEntrySerializer(serializers.Serializer):
    id = serializers.CharField()
    description = serializers.CharField()
    order = serializers.IntegerField()
    profile_id = serializers.CharField()


class ProjectSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    long_description = serializers.CharField()
    image = serializers.CharField()
    images = serializers.ListField(child=serializers.CharField())
    technologies = serializers.ListField(child=serializers.CharField())
    category = serializers.CharField()
    live_url = serializers.CharField()
    repo_url = serializers.CharField()
    created_at = serializers.CharField()


class PortfolioSnapshotSerializer(serializers.Serializer):
    """
    Serializer for PortfolioSnapshot.

    ``profile`` is null when no profile row exists yet.
    """

    profile = ProfileSerializer(allow_null=True)
    skills = SkillSerializer(many=True)
    journey = JourneyEntrySerializer(many=True)
    projects = ProjectSerializer(many=True)
    loading = serializers.BooleanField()
    error = serializers.CharField(allow_null=True)
