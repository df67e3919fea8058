def test_metrics_exposes_request_latency(client):
    client.get("/health")

    res = client.get("/metrics")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")

    body = res.text
    assert "http_server_request_duration_seconds_bucket" in body
    assert 'route="/health"' in body
    assert 'method="GET"' in body


def test_metrics_use_route_template_not_raw_path(client, auth_headers):
    client.get("/api/dm/bob", headers=auth_headers)

    body = client.get("/metrics").text
    assert 'route="/api/dm/{username}"' in body
    assert 'route="/api/dm/bob"' not in body


def test_metrics_count_domain_errors(client):
    client.get("/api/channels/all")

    body = client.get("/metrics").text
    assert 'chat_errors_total{error_type="UnauthenticatedError"}' in body
