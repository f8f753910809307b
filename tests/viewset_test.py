"""Unit tests for view set."""

from rest_framework import status
from rest_framework import test

from django import urls


class ViewSetTest(test.APITestCase):

    def setUp(self):
        self.url = urls.reverse('score-game')

    def score(self, frames):
        return self.client.post(self.url, {'frames': frames}, format='json')

    def test_score_game(self):
        response = self.score(['X', '7/', '7-2', '9/', 'X', 'X', 'X', '2-3',
                               '6/', '7/3'])
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        actual = response.json()
        assert actual['total_score'] == 168
        assert actual['frames'][0] == {
            'frame': 1, 'frame_score': 20, 'total_score_for_frame': 20}
        assert [frame['frame_score'] for frame in actual['frames']] == [
            20, 17, 9, 20, 30, 22, 15, 5, 17, 13]

    def test_score_game__in_progress(self):
        scores = ['X', '7/', '7-2', '9/', 'X', 'X', 'X']
        totals = {
            0: None,
            1: 20,
            2: 46,
            3: 46,
            4: 66,
            5: 66,
            6: 96,
        }
        for index in range(len(scores)):
            response = self.score(scores[:index + 1])
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            assert response.json()['total_score'] == totals[index]

    def test_score_game__last_all_strikes(self):
        response = self.score(['X', '7/', '7-2', '9/', 'X', 'X', 'X', '4/',
                               '2-3', 'X-X-X'])
        assert response.json()['total_score'] == 187

    def test_score_game__no_frames(self):
        response = self.score([])
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        assert response.json() == {'total_score': None, 'frames': []}

    def test_score_game__invalid_throws(self):
        response = self.score(['X', '6-6'])
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        assert response.json() == {'errors': [{
            'error_code': 400,
            'error_type': 'InvalidThrowError',
            'error_message': ('2 throws of an open frame must knock down '
                              'less than 10 pins')}]}

    def test_score_game__invalid_notation(self):
        response = self.score(['X', 'XX'])
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        assert response.json() == {'errors': [{
            'error_code': 400,
            'error_type': 'ValidationError',
            'error_message': 'frames[1]: Frame notation: XX is invalid.'}]}

    def test_score_game__tenth_frame_notation_too_early(self):
        response = self.score(['X-X-X'])
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        assert response.json() == {'errors': [{
            'error_code': 400,
            'error_type': 'InvalidNotationError',
            'error_message': ('Frame notation: \'X-X-X\' is invalid for '
                              'frame: 1.')}]}

    def test_score_game__missing_frames(self):
        response = self.client.post(self.url, {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        assert response.json() == {'errors': [{
            'error_code': 400,
            'error_type': 'ValidationError',
            'error_message': 'frames: This field is required.'}]}
