"""Tests for the guidance JSON endpoints."""

from deedguide import create_app
from factories import wire_fact_sheet


def test_health_endpoint(client):
    response = client.get('/health')

    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'healthy'
    assert data['service'] == 'deedguide'
    assert 'timestamp' in data


def test_validate_complete_stage(client):
    response = client.post('/guidance/validate/0', json=wire_fact_sheet())

    assert response.status_code == 200
    assert response.get_json() == {'stage': 0, 'valid': True, 'errors': {}}


def test_validate_reports_missing_fields(client):
    response = client.post('/guidance/validate/2', json=wire_fact_sheet(propertyOrigin='', isSecured=None))

    data = response.get_json()
    assert response.status_code == 200
    assert data['valid'] is False
    assert set(data['errors']) == {'propertyOrigin', 'isSecured'}


def test_validate_owner_stage(client):
    sheet = wire_fact_sheet()
    sheet['owners'][1]['name'] = ''

    data = client.post('/guidance/validate/4', json=sheet).get_json()
    assert set(data['errors']) == {'name'}


def test_generate_returns_results_and_outcomes(client):
    response = client.post('/guidance/generate', json=wire_fact_sheet(isMortgaged='dang_the_chap'))

    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert len(data['results']) == 3

    owners = [o for o in data['outcomes'] if o['kind'] == 'owner']
    flags = [o for o in data['outcomes'] if o['kind'] == 'flag']
    assert [o['rule'] for o in owners] == ['married_before_acquisition', 'age_9_to_15']
    assert owners[0]['signers'] == ['owner', 'spouse']
    assert [f['flag'] for f in flags] == ['mortgage_release_needed']
    assert 'TÀI SẢN CHUNG với bà LE THI CUC' in data['results'][0]


def test_generate_keeps_vietnamese_readable(client):
    response = client.post('/guidance/generate', json=wire_fact_sheet())
    assert 'TÀI SẢN'.encode('utf-8') in response.data


def test_generate_without_certificate(client):
    sheet = wire_fact_sheet(hasCertificate='khong', propertyOrigin=None, owners=[])

    data = client.post('/guidance/generate', json=sheet).get_json()
    assert data['success'] is True
    assert data['results'] == ['[Hướng dẫn]: HS KHÔNG ĐỦ ĐIỀU KIỆN ĐỂ CÔNG CHỨNG']
    assert data['outcomes'] == []


def test_generate_rejects_incomplete_sheet(client):
    response = client.post('/guidance/generate', json=wire_fact_sheet(guidanceDate=''))

    assert response.status_code == 422
    data = response.get_json()
    assert data['success'] is False
    assert 'guidanceDate' in data['errors']['0']


def test_generate_rejects_unknown_code(client):
    response = client.post('/guidance/generate', json=wire_fact_sheet(transactionType='thue'))

    assert response.status_code == 400
    assert 'transactionType' in response.get_json()['error']


def test_generate_rejects_non_object_body(client):
    response = client.post('/guidance/generate', json=['not', 'a', 'sheet'])
    assert response.status_code == 400


def test_report_download(client):
    response = client.post('/guidance/report.txt', json=wire_fact_sheet())

    assert response.status_code == 200
    assert response.mimetype == 'text/plain'
    assert 'huong-dan-ho-so.txt' in response.headers['Content-Disposition']
    text = response.get_data(as_text=True)
    assert 'PHIẾU HƯỚNG DẪN HỒ SƠ BAN ĐẦU (CÁ NHÂN)' in text
    assert '[MỤC 2]' in text


def test_unknown_route_returns_json_error(client):
    response = client.get('/guidance/nope')

    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_owner_count_above_limit_is_rejected(client):
    response = client.post('/guidance/validate/0', json={'numberOfOwners': 3000000})

    assert response.status_code == 400
    assert 'numberOfOwners' in response.get_json()['error']


def test_owner_list_above_limit_is_rejected(client):
    sheet = wire_fact_sheet(numberOfOwners=None, owners=[{'id': i} for i in range(1, 50)])

    response = client.post('/guidance/generate', json=sheet)
    assert response.status_code == 400


def test_production_app_starts_without_secret_key(monkeypatch):
    monkeypatch.delenv('SECRET_KEY', raising=False)
    app = create_app('production')

    response = app.test_client().post('/guidance/generate', json=wire_fact_sheet())
    assert response.status_code == 200
