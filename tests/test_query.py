import httpx
import pytest

from bunnystream import QueryBuilder

URL = 'https://video.bunnycdn.com/library/123/videos/video-abc'


@pytest.fixture
def request_():
    return httpx.Request('PUT', URL)


def test_setters_do_not_touch_request_before_commit():
    request = httpx.Request('PUT', URL + '?keep=1')
    before = str(request.url)

    (
        QueryBuilder(request)
        .set_bool('jitEnabled', True)
        .set_string('sourceLanguage', 'en')
        .set_strings('enabledResolutions', ['720p', '1080p'])
    )

    assert str(request.url) == before


@pytest.mark.parametrize('value, expected', [(True, 'true'), (False, 'false')])
def test_set_bool(request_, value, expected):
    QueryBuilder(request_).set_bool('jitEnabled', value).commit()
    assert request_.url.params['jitEnabled'] == expected


def test_set_bool_none_is_omitted(request_):
    QueryBuilder(request_).set_bool('jitEnabled', None).commit()
    assert 'jitEnabled' not in request_.url.params


def test_set_string(request_):
    QueryBuilder(request_).set_string('sourceLanguage', 'en').commit()
    assert request_.url.params['sourceLanguage'] == 'en'


@pytest.mark.parametrize('value', ['', '   ', '\t\n', None])
def test_set_string_blank_is_omitted(request_, value):
    QueryBuilder(request_).set_string('sourceLanguage', value).commit()
    assert 'sourceLanguage' not in request_.url.params


def test_set_strings_joins_with_comma(request_):
    QueryBuilder(request_).set_strings('enabledResolutions', ['720p', '1080p']).commit()
    assert request_.url.params['enabledResolutions'] == '720p,1080p'


def test_set_strings_single_value(request_):
    QueryBuilder(request_).set_strings('enabledOutputCodecs', ['vp9']).commit()
    assert request_.url.params['enabledOutputCodecs'] == 'vp9'


@pytest.mark.parametrize('values', [[], (), None, iter(())])
def test_set_strings_empty_is_omitted(request_, values):
    QueryBuilder(request_).set_strings('enabledResolutions', values).commit()
    assert 'enabledResolutions' not in request_.url.params


def test_commit_without_params_leaves_url_alone(request_):
    QueryBuilder(request_).commit()
    assert str(request_.url) == URL


def test_commit_preserves_existing_params():
    request = httpx.Request('PUT', URL + '?keep=1&other=x')
    QueryBuilder(request).set_bool('jitEnabled', True).commit()

    params = request.url.params
    assert params['keep'] == '1'
    assert params['other'] == 'x'
    assert params['jitEnabled'] == 'true'


def test_commit_overwrites_existing_param_with_same_key():
    request = httpx.Request('PUT', URL + '?jitEnabled=false')
    QueryBuilder(request).set_bool('jitEnabled', True).commit()

    assert request.url.params.get_list('jitEnabled') == ['true']


def test_commit_is_idempotent(request_):
    builder = (
        QueryBuilder(request_)
        .set_bool('jitEnabled', True)
        .set_strings('enabledResolutions', ['720p'])
    )
    builder.commit()
    first = str(request_.url)
    builder.commit()

    assert str(request_.url) == first
    keys = [k for k, _ in request_.url.params.multi_items()]
    assert len(keys) == len(set(keys))


def test_last_write_wins_for_same_key(request_):
    (
        QueryBuilder(request_)
        .set_string('sourceLanguage', 'en')
        .set_string('sourceLanguage', 'de')
        .commit()
    )
    assert request_.url.params.get_list('sourceLanguage') == ['de']


def test_blank_value_does_not_clear_earlier_value(request_):
    (
        QueryBuilder(request_)
        .set_string('sourceLanguage', 'en')
        .set_string('sourceLanguage', '  ')
        .set_bool('jitEnabled', True)
        .set_bool('jitEnabled', None)
        .commit()
    )
    assert request_.url.params['sourceLanguage'] == 'en'
    assert request_.url.params['jitEnabled'] == 'true'


def test_order_does_not_matter_for_disjoint_keys():
    a = httpx.Request('PUT', URL)
    b = httpx.Request('PUT', URL)

    (
        QueryBuilder(a)
        .set_bool('generateTitle', True)
        .set_string('sourceLanguage', 'en')
        .set_strings('transcribeLanguages', ['en', 'fr'])
        .commit()
    )
    (
        QueryBuilder(b)
        .set_strings('transcribeLanguages', ['en', 'fr'])
        .set_string('sourceLanguage', 'en')
        .set_bool('generateTitle', True)
        .commit()
    )

    assert dict(a.url.params) == dict(b.url.params)


def test_nil_and_empty_values_are_all_skipped(request_):
    (
        QueryBuilder(request_)
        .set_bool('jitEnabled', None)
        .set_string('sourceLanguage', '')
        .set_strings('enabledResolutions', [])
        .set_bool('generateMoments', False)
        .commit()
    )
    assert dict(request_.url.params) == {'generateMoments': 'false'}
