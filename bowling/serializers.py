"""Encapsulates all instances of serialisers."""
from rest_framework import serializers

from bowling import fields as bowling_fields

import collections


class BaseSerializer(serializers.Serializer):

    def to_representation(self, instance):
        """Return just errors if applicable, and exclude errors otherwise."""
        ret = super(BaseSerializer, self).to_representation(instance)
        # If error exists, then all fields should be removed.
        if 'errors' in ret and ret.get('errors'):
            return collections.OrderedDict(errors=ret['errors'])

        return collections.OrderedDict((k, v) for k, v in ret.items()
                                       if k != 'errors')


class ErrorSerializer(serializers.Serializer):
    """Representation of any errors."""
    error_code = serializers.IntegerField()
    error_type = serializers.CharField(max_length=50)
    error_message = serializers.CharField(max_length=200)


class FrameScoreSerializer(serializers.Serializer):
    frame = serializers.IntegerField(min_value=1, max_value=10)
    frame_score = serializers.IntegerField(allow_null=True, max_value=30)
    total_score_for_frame = serializers.IntegerField(allow_null=True,
                                                     max_value=300)


class ScoreCardSerializer(BaseSerializer):
    """Encapsulates the scores per frame and the total score."""
    total_score = serializers.IntegerField(allow_null=True)
    frames = FrameScoreSerializer(many=True)
    errors = ErrorSerializer(required=False, many=True)


class ScoreRequestSerializer(serializers.Serializer):
    """The frames of a game, in the order they were bowled."""
    frames = serializers.ListField(
        child=bowling_fields.FrameNotationField(), allow_empty=True,
        max_length=10)
