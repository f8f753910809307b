from rest_framework.urlpatterns import format_suffix_patterns
from django.urls import re_path
from bowling import viewset

urlpatterns = format_suffix_patterns([
    re_path(r'^game/score$',
            viewset.ScoreViewSet.as_view({'post': 'score_game'}),
            name='score-game'),
])
