"""Hello World — a small junction app.

Demonstrates middleware, path parameters, a mounted sub-router,
returning a Response, and a custom no-match callback.

Run with any ASGI server:
    uvicorn app:app
"""

from junction import HTTPError, Response, create_router, timeout


async def server_header(request, writer, next):
    writer.headers["Server"] = "junction"
    return await next()


def index(request, writer, next):
    return Response("Hello, World!")


def greet(request, writer, next):
    return Response(f"Hello, {request.params['name']}!")


@timeout(2.0)
async def status(request, writer, next):
    return Response('{"status": "ok"}', content_type="application/json")


def forbidden(request, writer, next):
    raise HTTPError(status=403, detail="Admins only")


def not_found(request, writer):
    return Response(f"Nothing at {request.path}", status=404)


api = create_router().get("/status", status).get("/admin", forbidden)

router = (
    create_router()
    .use(server_header)
    .get("/", index)
    .get("/greet/:name", greet)
    .use("/api", api)
)

app = router.handler(on_no_match=not_found)
