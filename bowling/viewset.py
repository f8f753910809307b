"""
Encapsulates all the view sets required to score the bowling game.
"""

from bowling import models
from bowling import serializers
from bowling import services as bowling_services

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework import viewsets


def serialized_object(serializer_class, obj, http_status):
    serialized_instance = serializer_class(obj)
    return Response(serialized_instance.data, status=http_status)


def error_messages(errors, prefix=''):
    """Flattens the validation errors of a serializer into messages."""
    if isinstance(errors, dict):
        for key, value in errors.items():
            key_prefix = '{}[{}]'.format(prefix, key) if prefix else str(key)
            yield from error_messages(value, key_prefix)
    elif isinstance(errors, list):
        for value in errors:
            yield from error_messages(value, prefix)
    else:
        yield '{}: {}'.format(prefix, errors) if prefix else str(errors)


class ScoreViewSet(viewsets.ViewSet):
    serializer_class = serializers.ScoreCardSerializer

    @action(detail=False, methods=['post'])
    def score_game(self, request, *args, **kwargs):
        """Returns the score of every frame bowled and the total score."""
        request_serializer = serializers.ScoreRequestSerializer(
            data=request.data)
        if request_serializer.is_valid():
            score_card = bowling_services.score_frames(
                request_serializer.validated_data['frames'])
        else:
            score_card = models.ScoreCard()
            for message in error_messages(request_serializer.errors):
                score_card.add_error(models.Error(
                    error_code=400, error_type='ValidationError',
                    error_message=message))

        http_status = (status.HTTP_400_BAD_REQUEST if score_card.errors
                       else status.HTTP_200_OK)
        return serialized_object(self.serializer_class, score_card, http_status)
