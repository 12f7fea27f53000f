def test_health_returns_200(api):
    st, js = api.get("/health")
    assert st == 200
    assert js["status"] == "ok"
    assert js["products"] == 0


def test_unknown_route_is_404(api):
    st, _ = api.get("/api/nope")
    assert st == 404
