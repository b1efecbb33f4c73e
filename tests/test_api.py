"""Typed wrappers: each sends its method's params and decodes its result."""

from conduit_client.models.edge import EdgeSearchRequest
from conduit_client.models.macro import MacroCreateMemeRequest
from conduit_client.models.remarkup import RemarkupContext, RemarkupProcessRequest
from conduit_client.models.user import UserQueryRequest

PHID_RESULT = {
    "phid": "PHID-TASK-abc",
    "uri": "https://phab.example.com/T1",
    "typeName": "Maniphest Task",
    "type": "TASK",
    "name": "T1",
    "fullName": "T1: Fix the build",
    "status": "open",
}


class TestConduit:
    def test_query(self, conn, server):
        server.register_result("conduit.query", {
            "conduit.ping": {"description": "Basic ping.", "params": [], "return": "string"},
            "user.whoami": {"description": "Retrieve information about the logged-in user.",
                            "params": {}, "return": "nonempty dict<string, wild>"},
        })
        methods = conn.conduit.query()
        assert methods["user.whoami"].returns == "nonempty dict<string, wild>"

    def test_ping(self, conn, server):
        server.register_result("conduit.ping", "phab01.example.com")
        assert conn.conduit.ping() == "phab01.example.com"

    def test_get_capabilities_is_cached(self, conn, server):
        caps = conn.conduit.get_capabilities()
        assert caps.supports_auth("token")
        assert caps.output == ["json", "human"]
        conn.conduit.get_capabilities()
        assert server.hits["conduit.getcapabilities"] == 1


class TestUser:
    def test_query(self, conn, server):
        server.register_result("user.query", [
            {"phid": "PHID-USER-1", "userName": "alice", "realName": "Alice A.",
             "image": "https://phab.example.com/file/alice.png", "uri": "https://phab.example.com/p/alice/",
             "roles": ["admin", "verified", "approved", "activated"]},
        ])
        users = conn.user.query(UserQueryRequest(usernames=["alice"], limit=1))
        assert server.last_params("user.query") == {
            "usernames": ["alice"], "limit": 1, "__conduit__": {"token": "some-token"},
        }
        assert len(users) == 1
        assert users[0].user_name == "alice"
        assert "admin" in users[0].roles


class TestEdge:
    def test_search(self, conn, server):
        server.register_result("edge.search", {
            "data": [{"sourcePHID": "PHID-TASK-1", "edgeType": "task.revision",
                      "destinationPHID": "PHID-DREV-1"}],
            "cursor": {"limit": 100, "after": None, "before": None},
        })
        resp = conn.edge.search(EdgeSearchRequest(source_phids=["PHID-TASK-1"], types=["task.revision"]))
        params = server.last_params("edge.search")
        assert params["sourcePHIDs"] == ["PHID-TASK-1"]
        assert params["types"] == ["task.revision"]
        assert resp.data[0].destination_phid == "PHID-DREV-1"
        assert resp.cursor.limit == 100


class TestMacro:
    def test_create_meme(self, conn, server):
        server.register_result("macro.creatememe", {"uri": "https://phab.example.com/file/meme.jpg"})
        resp = conn.macro.create_meme(MacroCreateMemeRequest(macro_name="party", upper_text="ship it"))
        assert server.last_params("macro.creatememe")["macroName"] == "party"
        assert server.last_params("macro.creatememe")["upperText"] == "ship it"
        assert "lowerText" not in server.last_params("macro.creatememe")
        assert resp.uri.endswith("meme.jpg")


class TestPHID:
    def test_query(self, conn, server):
        server.register_result("phid.query", {"PHID-TASK-abc": PHID_RESULT})
        resp = conn.phid.query(["PHID-TASK-abc"])
        assert server.last_params("phid.query")["phids"] == ["PHID-TASK-abc"]
        assert resp["PHID-TASK-abc"].full_name == "T1: Fix the build"

    def test_lookup(self, conn, server):
        server.register_result("phid.lookup", {"T1": PHID_RESULT})
        resp = conn.phid.lookup(["T1"])
        assert server.last_params("phid.lookup")["names"] == ["T1"]
        assert resp["T1"].phid == "PHID-TASK-abc"
        assert resp["T1"].type_name == "Maniphest Task"

    def test_empty_map_sent_as_list(self, conn, server):
        server.register_result("phid.lookup", [])
        assert conn.phid.lookup(["T999"]) == {}


class TestRemarkup:
    def test_process(self, conn, server):
        server.register_result("remarkup.process", [{"content": "<p><strong>bold</strong></p>"}])
        resp = conn.remarkup.process(
            RemarkupProcessRequest(context=RemarkupContext.MANIPHEST, contents=["**bold**"]),
        )
        assert server.last_params("remarkup.process")["context"] == "maniphest"
        assert resp[0].content == "<p><strong>bold</strong></p>"
