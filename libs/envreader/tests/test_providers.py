from envreader import EnvironmentReader, EnvProvider, MappingProvider, OsEnvironProvider


class StaticProvider:
    def __init__(self, values):
        self.values = values

    def get(self, name):
        return self.values.get(name)

    def __contains__(self, name):
        return name in self.values


def test_mapping_provider():
    p = MappingProvider({"A": "1"})
    assert p.get("A") == "1"
    assert p.get("B") is None
    assert "A" in p
    assert "B" not in p


def test_os_environ_provider(monkeypatch):
    monkeypatch.setenv("ENVREADER_PROVIDER_TEST", "yes")
    p = OsEnvironProvider()
    assert p.get("ENVREADER_PROVIDER_TEST") == "yes"
    assert "ENVREADER_PROVIDER_TEST" in p

    monkeypatch.delenv("ENVREADER_PROVIDER_TEST")
    assert p.get("ENVREADER_PROVIDER_TEST") is None


def test_providers_satisfy_protocol():
    assert isinstance(OsEnvironProvider(), EnvProvider)
    assert isinstance(MappingProvider({}), EnvProvider)


def test_reader_accepts_custom_provider():
    r = EnvironmentReader(StaticProvider({"PORT": "8080"}))
    assert r.get_env_int("PORT", 0) == 8080
    assert r.is_set("PORT")
    assert not r.is_set("HOST")


def test_reader_wraps_plain_mapping():
    r = EnvironmentReader({"NAME": "svc"})
    assert isinstance(r.source, MappingProvider)
    assert r.get_env("NAME", "x") == "svc"


def test_reader_defaults_to_os_environ():
    assert isinstance(EnvironmentReader().source, OsEnvironProvider)
