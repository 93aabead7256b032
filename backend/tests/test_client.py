import client as smoke


class FakeResponse:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self._body = body

    def json(self):
        return self._body


class FakeHttp:
    def __init__(self):
        self.calls = []

    def _record(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs.get("json")))
        return FakeResponse(200, {"status": "success", "data": {"id": 1}})

    def get(self, url, **kwargs):
        return self._record("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._record("POST", url, **kwargs)

    def put(self, url, **kwargs):
        return self._record("PUT", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._record("DELETE", url, **kwargs)


def test_check_health_hits_root(monkeypatch):
    monkeypatch.setattr(smoke, "API", "http://svc:8080/v1")
    http = FakeHttp()

    smoke.check_health(http)

    assert http.calls == [("GET", "http://svc:8080/healthz", None)]


def test_check_tasks_walks_crud(monkeypatch):
    monkeypatch.setattr(smoke, "API", "http://svc:8080/v1")
    http = FakeHttp()

    smoke.check_tasks(http)

    assert [(m, u) for m, u, _ in http.calls] == [
        ("POST", "http://svc:8080/v1/tasks"),
        ("GET", "http://svc:8080/v1/tasks"),
        ("GET", "http://svc:8080/v1/tasks/1"),
        ("PUT", "http://svc:8080/v1/tasks/1"),
        ("DELETE", "http://svc:8080/v1/tasks/1"),
    ]


def test_check_events_sends_invalid_range(monkeypatch):
    monkeypatch.setattr(smoke, "API", "http://svc:8080/v1")
    http = FakeHttp()

    smoke.check_events(http)

    rejected = [body for m, u, body in http.calls if m == "POST"][1]
    assert rejected["startTime"] == rejected["endTime"]
