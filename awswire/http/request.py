"""
The HTTP request produced by the marshallers. A request is not bound to a server: it is backed by a synthetic WSGI
environment, so it can be inspected with werkzeug's request API or handed to any HTTP client.
"""
from io import BytesIO
from typing import IO, TYPE_CHECKING, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote, unquote, urlsplit

if TYPE_CHECKING:
    from _typeshed.wsgi import WSGIEnvironment

from werkzeug.datastructures import Headers
from werkzeug.wrappers.request import Request as WerkzeugRequest

from awswire.utils import strings

Body = Union[bytes, str, IO[bytes]]

# headers which WSGI keeps in CGI variables without the HTTP_ prefix
CGI_HEADERS = ("CONTENT_TYPE", "CONTENT_LENGTH")


def to_wsgi_path(path: str) -> str:
    # werkzeug decodes the WSGI path variables from latin-1 ("WSGI decoding dance")
    return unquote(quote(path), "latin-1")


def header_environ(headers: Union[Mapping, Headers]) -> Dict[str, str]:
    """
    Converts HTTP headers to their WSGI environment variables, f.e. ``X-Amz-Target`` to ``HTTP_X_AMZ_TARGET``.
    Repeated headers are joined with a comma.
    """
    environ = {}
    for key, value in headers.items():
        name = key.upper().replace("-", "_")
        if name not in CGI_HEADERS:
            name = "HTTP_" + name
        environ[name] = f"{environ[name]},{value}" if name in environ else value
    return environ


def create_environ(
    method: str = "GET",
    path: str = "",
    headers: Optional[Union[Mapping, Headers]] = None,
    body: Optional[Body] = None,
    scheme: str = "https",
    query_string: Optional[str] = None,
    server: Optional[Tuple[str, Optional[int]]] = None,
    raw_path: Optional[str] = None,
) -> "WSGIEnvironment":
    """
    Creates the WSGI environment of a request which is not received by a server.

    :param method: the HTTP method
    :param path: the decoded path of the request
    :param headers: the HTTP headers
    :param body: the body, either as bytes / string, or as a readable stream
    :param scheme: http or https
    :param query_string: the query string (without ``?``)
    :param server: host and (optional) port, the port defaults to the one of the scheme
    :param raw_path: the path with its original URL encoding
    :return: a WSGI environment
    """
    host, port = server or ("localhost", None)
    default_port = "443" if scheme == "https" else "80"

    environ = {
        "REQUEST_METHOD": method,
        "SCRIPT_NAME": "",
        "PATH_INFO": to_wsgi_path(path),
        "QUERY_STRING": query_string or "",
        "SERVER_NAME": host,
        "SERVER_PORT": str(port) if port else default_port,
        "SERVER_PROTOCOL": "HTTP/1.1",
    }
    if raw_path:
        environ["RAW_URI"] = f"{raw_path}?{query_string}" if query_string else raw_path
        environ["REQUEST_URI"] = environ["RAW_URI"]
    if headers:
        environ.update(header_environ(headers))

    if isinstance(body, (str, bytes)) or not body:
        data = strings.to_bytes(body) if body else b""
        if data and "CONTENT_LENGTH" not in environ:
            environ["CONTENT_LENGTH"] = str(len(data))
        body = BytesIO(data)

    environ.update(
        {
            "wsgi.version": (1, 0),
            "wsgi.url_scheme": scheme,
            "wsgi.input": body,
            "wsgi.input_terminated": True,
            "wsgi.errors": BytesIO(),
            "wsgi.multithread": True,
            "wsgi.multiprocess": False,
            "wsgi.run_once": False,
        }
    )
    return environ


class Request(WerkzeugRequest):
    """
    A werkzeug request created from its parts instead of a server's WSGI environment. Unlike werkzeug's requests, the
    headers are mutable, so additional headers (like a checksum) can still be added after the request is created.
    """

    def __init__(
        self,
        method: str = "GET",
        path: str = "",
        headers: Union[Mapping, Headers] = None,
        body: Body = None,
        scheme: str = "https",
        query_string: Union[bytes, str] = b"",
        server: Optional[Tuple[str, Optional[int]]] = None,
        raw_path: str = None,
    ):
        super().__init__(
            create_environ(
                method=method,
                path=path,
                headers=headers,
                body=body,
                scheme=scheme,
                query_string=strings.to_str(query_string, "latin-1"),
                server=server,
                raw_path=raw_path,
            )
        )

        # the environment only offers read-only headers, content type and length are kept in separate variables
        mutable = Headers(headers)
        for name in ("Content-Type", "Content-Length"):
            if name not in mutable and name in self.headers:
                mutable[name] = self.headers[name]
        self.headers = mutable


def get_raw_path(request: WerkzeugRequest) -> str:
    """
    Returns the path of the request with its original URL encoding (werkzeug's ``request.path`` is always decoded),
    without the query string.
    """
    # the raw URI may also be a full URL
    return urlsplit(request.environ.get("RAW_URI", request.path)).path


def get_full_raw_path(request: WerkzeugRequest) -> str:
    """
    Returns the raw path including the query string. Unlike ``request.url``, the path keeps its original encoding and
    the query string is not decoded.
    """
    if not request.query_string:
        return get_raw_path(request)
    return f"{get_raw_path(request)}?{strings.to_str(request.query_string)}"
