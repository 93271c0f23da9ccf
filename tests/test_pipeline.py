import pytest
from bson import ObjectId

from app.dto.common import PageDto
from app.models.mongodb import (
    VideoRepository, CommentRepository, LikeRepository, TweetRepository, PlaylistRepository,
    SubscriptionRepository
)
from common.utils import pipeline as stages


def test_escape_regex_escapes_metacharacters():
    assert stages.escape_regex('a.b*c') == r'a\.b\*c'
    assert stages.escape_regex('(hi)[1]{2}') == r'\(hi\)\[1\]\{2\}'
    assert stages.escape_regex('$^|?+\\') == r'\$\^\|\?\+\\'


def test_escape_regex_empty_input():
    assert stages.escape_regex(None) == ''
    assert stages.escape_regex('') == ''


def test_sort_by_adds_id_tiebreak():
    assert stages.sort_by('views', 1) == {'$sort': {'views': 1, '_id': 1}}
    assert stages.sort_by('_id', -1) == {'$sort': {'_id': -1}}


def test_paginate_builds_facet():
    stage = stages.paginate(3, 20)

    assert stage['$facet']['docs'] == [{'$skip': 40}, {'$limit': 20}]
    assert stage['$facet']['meta'] == [{'$count': 'total'}]


def test_lookup_user_projects_only_public_fields():
    stage = stages.lookup_user('owner')['$lookup']

    assert stage['from'] == 'users'
    assert stage['localField'] == 'owner'
    assert stage['foreignField'] == '_id'
    assert stage['as'] == 'owner'
    assert stage['pipeline'] == [{'$project': {'fullName': 1, 'email': 1, 'avatar': 1}}]


def test_lookup_without_pipeline_omits_key():
    stage = stages.lookup('videos', 'video')['$lookup']

    assert 'pipeline' not in stage


def test_read_page_computes_metadata():
    result = [{'docs': [{'n': 1}, {'n': 2}], 'meta': [{'total': 25}]}]

    page = stages.read_page(result, page=2, limit=10)

    assert isinstance(page, PageDto)
    assert page.docs == [{'n': 1}, {'n': 2}]
    assert page.total_docs == 25
    assert page.total_pages == 3
    assert page.has_next_page is True
    assert page.has_prev_page is True


def test_read_page_handles_empty_result():
    page = stages.read_page([{'docs': [], 'meta': []}], page=1, limit=10)

    assert page.docs == []
    assert page.total_docs == 0
    assert page.total_pages == 0
    assert page.has_next_page is False
    assert page.has_prev_page is False


def test_read_page_applies_converter():
    result = [{'docs': [{'n': 1}], 'meta': [{'total': 1}]}]

    page = stages.read_page(result, 1, 10, convert=lambda d: d['n'] * 10)

    assert page.docs == [10]


def test_search_pipeline_stage_order():
    owner_id = ObjectId()

    pipeline = VideoRepository.search_pipeline(owner_id, 'cat.video', 'views', 1, 2, 5)

    assert [next(iter(s)) for s in pipeline] == ['$match', '$lookup', '$unwind', '$sort', '$facet']
    match_stage = pipeline[0]['$match']
    assert match_stage['owner'] == owner_id
    assert match_stage['$or'][0] == {'title': {'$regex': r'cat\.video', '$options': 'i'}}
    assert pipeline[3] == {'$sort': {'views': 1, '_id': 1}}
    assert pipeline[4]['$facet']['docs'] == [{'$skip': 5}, {'$limit': 5}]


def test_search_pipeline_without_query_has_no_regex():
    pipeline = VideoRepository.search_pipeline(ObjectId(), None, 'createdAt', -1, 1, 10)

    assert '$or' not in pipeline[0]['$match']


def test_comment_pipeline_joins_owner_and_video_summary():
    pipeline = CommentRepository.video_page_pipeline(ObjectId(), 1, 10)

    lookups = [s['$lookup'] for s in pipeline if '$lookup' in s]
    assert [l['from'] for l in lookups] == ['users', 'videos']
    assert lookups[1]['pipeline'] == [{'$project': {
        'title': 1, 'thumbnail': 1, 'duration': 1, 'views': 1, 'owner': 1
    }}]
    assert '$facet' in pipeline[-1]


def test_liked_videos_pipeline_only_matches_video_likes():
    user_id = ObjectId()

    pipeline = LikeRepository.liked_videos_pipeline(user_id)

    assert pipeline[0] == {'$match': {'likedBy': user_id, 'video': {'$ne': None}}}
    assert pipeline[-1] == {'$sort': {'createdAt': -1, '_id': -1}}


PUBLIC_USER_FIELDS = {'fullName', 'email', 'avatar', 'coverImage'}


def _user_lookups(pipeline):
    for stage in pipeline:
        lookup = stage.get('$lookup')
        if not lookup:
            continue
        if lookup['from'] == 'users':
            yield lookup
        yield from _user_lookups(lookup.get('pipeline', []))


@pytest.mark.parametrize('pipeline, expected_lookups', [
    pytest.param(VideoRepository.with_owner(stages.match(_id=ObjectId())), 1, id='video'),
    pytest.param(VideoRepository.search_pipeline(ObjectId(), 'q', 'createdAt', -1, 1, 10), 1, id='video-search'),
    pytest.param(CommentRepository.video_page_pipeline(ObjectId(), 1, 10), 1, id='comments'),
    pytest.param(TweetRepository.joined_pipeline(stages.match(owner=ObjectId())), 1, id='tweets'),
    pytest.param(PlaylistRepository.summary_pipeline(stages.match(_id=ObjectId())), 1, id='playlist'),
    pytest.param(PlaylistRepository.detail_pipeline(ObjectId()), 2, id='playlist-detail'),
    pytest.param(SubscriptionRepository.joined_pipeline(stages.match(channel=ObjectId())), 2, id='subscriptions'),
    pytest.param(LikeRepository.liked_videos_pipeline(ObjectId()), 1, id='liked-videos'),
])
def test_user_lookups_only_project_public_fields(pipeline, expected_lookups):
    lookups = list(_user_lookups(pipeline))

    assert len(lookups) == expected_lookups
    for lookup in lookups:
        assert lookup['pipeline'][0] == {'$project': {field: 1 for field in lookup['pipeline'][0]['$project']}}
        projected = set(lookup['pipeline'][0]['$project'])
        assert projected <= PUBLIC_USER_FIELDS
        assert 'password' not in projected
        assert 'refreshToken' not in projected


def test_playlist_detail_joins_videos_beside_stored_order():
    pipeline = PlaylistRepository.detail_pipeline(ObjectId())

    video_lookup = next(s['$lookup'] for s in pipeline if s.get('$lookup', {}).get('from') == 'videos')
    assert video_lookup['localField'] == 'videos'
    assert video_lookup['as'] == 'videoDocs'


def test_order_videos_follows_stored_ids():
    first, second = ObjectId(), ObjectId()
    doc = {'videos': [second, first], 'videoDocs': [{'_id': first}, {'_id': second}]}

    assert PlaylistRepository.order_videos(doc)['videos'] == [{'_id': second}, {'_id': first}]
