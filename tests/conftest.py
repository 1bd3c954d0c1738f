"""Shared fixtures: an in-memory stand-in for the OpenSearch client."""
import json
import threading
import time
from types import SimpleNamespace

import pytest
from opensearchpy import NotFoundError
from opensearchpy.serializer import JSONSerializer


class FakeIndices:
    def __init__(self, client):
        self._client = client

    def exists(self, index):
        self._client.calls.append(("indices.exists", index))
        return index in self._client.index_store

    def create(self, index, body=None):
        self._client.calls.append(("indices.create", index))
        self._client.index_store[index] = {"body": body, "aliases": set()}
        return {"acknowledged": True, "shards_acknowledged": True, "index": index}

    def update_aliases(self, body):
        self._client.calls.append(("indices.update_aliases", body))
        for action in body["actions"]:
            add = action["add"]
            self._client.index_store[add["index"]]["aliases"].add(add["alias"])
        return {"acknowledged": True}

    def delete(self, index):
        self._client.calls.append(("indices.delete", index))
        self._client.index_store.pop(index)
        self._client.docs.pop(index, None)
        return {"acknowledged": True}


class FakeOpenSearch:
    """Records calls and keeps indexed documents in memory.

    ``bulk_side_effects`` is consumed one entry per bulk call: an exception
    instance is raised, anything else is ignored.
    """

    def __init__(self, bulk_delay=0.0, reject_ids=(), bulk_side_effects=()):
        self.index_store = {}
        self.docs = {}
        self.calls = []
        self.bulk_requests = []
        self.bulk_threads = set()
        self.bulk_delay = bulk_delay
        self.reject_ids = set(reject_ids)
        self.bulk_side_effects = list(bulk_side_effects)
        self.search_response = {"hits": {"total": {"value": 0}, "hits": []}}
        self._lock = threading.Lock()
        self.indices = FakeIndices(self)
        self.transport = SimpleNamespace(serializer=JSONSerializer())

    def bulk(self, body, **params):
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        lines = [json.loads(line) for line in body.splitlines() if line.strip()]
        pairs = list(zip(lines[::2], lines[1::2]))
        with self._lock:
            self.bulk_requests.append(pairs)
            self.bulk_threads.add(threading.current_thread().name)
            effect = self.bulk_side_effects.pop(0) if self.bulk_side_effects else None
        if self.bulk_delay:
            time.sleep(self.bulk_delay)
        if isinstance(effect, BaseException):
            raise effect

        items = []
        errors = False
        for action, source in pairs:
            meta = action["index"]
            if meta["_id"] in self.reject_ids:
                errors = True
                items.append(
                    {
                        "index": {
                            "_index": meta["_index"],
                            "_id": meta["_id"],
                            "status": 400,
                            "error": {"type": "mapper_parsing_exception", "reason": "failed to parse"},
                        }
                    }
                )
                continue
            with self._lock:
                self.docs.setdefault(meta["_index"], {})[meta["_id"]] = source
            items.append({"index": {"_index": meta["_index"], "_id": meta["_id"], "status": 201}})
        return {"took": 1, "errors": errors, "items": items}

    def delete(self, index, id):
        self.calls.append(("delete", index, id))
        if index not in self.docs and index not in self.index_store:
            raise NotFoundError(404, "index_not_found_exception", {"error": {"type": "index_not_found_exception"}})
        if id not in self.docs.get(index, {}):
            raise NotFoundError(404, "not_found", {"_index": index, "_id": id, "result": "not_found"})
        del self.docs[index][id]
        return {"_index": index, "_id": id, "result": "deleted"}

    def get(self, index, id):
        if id not in self.docs.get(index, {}):
            raise NotFoundError(404, "not_found", {"_index": index, "_id": id, "found": False})
        return {"_index": index, "_id": id, "found": True, "_source": self.docs[index][id]}

    def search(self, index=None, body=None, **params):
        self.calls.append(("search", index, body, params))
        return self.search_response


@pytest.fixture
def fake_client():
    return FakeOpenSearch()


@pytest.fixture
def fake_client_factory():
    return FakeOpenSearch
