import base64

TOKEN = "bearer_token_example"
BEARER_TOKEN = f"Bearer {TOKEN}"
OWNER_LOGIN = "Repository_owner_login"
OWNER_ID = "Repository_owner_id"
CONFIG_FILE_PATH = "path/src.yml"
CONFIG_FILE_CONTENT = "yml file content"


def make_webhook(**overrides):
    webhook = {
        "id": 1,
        "name": "web",
        "active": True,
        "type": "Repository",
        "events": ["push"],
        "config": {
            "url": "https://example.com/webhook",
            "content_type": "json",
            "insecure_ssl": "0",
        },
        "updated_at": "2024-01-02T00:00:00Z",
        "created_at": "2024-01-01T00:00:00Z",
        "url": "https://api.github.com/repos/octo/repo/hooks/1",
        "test_url": "https://api.github.com/repos/octo/repo/hooks/1/test",
        "ping_url": "https://api.github.com/repos/octo/repo/hooks/1/pings",
        "deliveries_url": "https://api.github.com/repos/octo/repo/hooks/1/deliveries",
        "last_response": {"code": None, "status": "unused", "message": None},
    }
    webhook.update(overrides)
    return webhook


def make_file_content(owner, name, path=CONFIG_FILE_PATH, text=CONFIG_FILE_CONTENT):
    return {
        "content": base64.b64encode(text.encode("utf-8")).decode("ascii"),
        "url": f"https://api.github.com/repos/{owner}/{name}/contents/{path}",
    }


def make_repository_node(name, entries=None, owner_login=OWNER_LOGIN, is_private=True, disk_usage=None):
    node = {
        "name": name,
        "owner": {"login": owner_login, "id": OWNER_ID},
        "isPrivate": is_private,
        "diskUsage": disk_usage,
    }
    if entries is not None:
        node["defaultBranchRef"] = {
            "target": {"__typename": "Commit", "tree": {"entries": entries}}
        }
    return node


def make_page(nodes, cursors=None):
    page = {"nodes": nodes}
    if cursors is not None:
        page["edges"] = [{"cursor": cursor} for cursor in cursors]
    return page
