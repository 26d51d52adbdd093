"""Proxy pattern: a stand-in object that controls access to another."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


def _emit(line: str) -> str:
    print(line)
    return line


# ----- Virtual proxy -----


class Image(ABC):
    """An image that can be shown."""

    filename: str

    @abstractmethod
    def display(self) -> str:
        """Show the image and return the line reported."""


class RealImage(Image):
    """An image that is loaded from disk as soon as it is created."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.load_count = 0
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        print(f"Loading image from disk: {self.filename} (expensive operation)")
        self.load_count += 1

    def display(self) -> str:
        return _emit(f"Displaying image: {self.filename}")


class ImageProxy(Image):
    """Defers loading the real image until it is first displayed."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self._real_image: RealImage | None = None
        print(f"ImageProxy created for: {filename} (no loading yet)")

    @property
    def loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> str:
        if self._real_image is None:
            print("First access - loading real image...")
            self._real_image = RealImage(self.filename)
        return self._real_image.display()


# ----- Protection proxy -----


class Document(ABC):
    @abstractmethod
    def display_content(self) -> str:
        """Show the content and return the line reported."""

    @abstractmethod
    def edit_content(self, new_content: str) -> bool:
        """Replace the content; return whether the edit happened."""


class SecureDocument(Document):
    """A document holding its content directly."""

    def __init__(self, initial: str) -> None:
        self.content = initial
        print("SecureDocument created")

    def display_content(self) -> str:
        return _emit(f"Document content: {self.content}")

    def edit_content(self, new_content: str) -> bool:
        self.content = new_content
        print("Document edited successfully")
        return True


class DocumentProxy(Document):
    """Lets every role read but only admins and editors write."""

    WRITER_ROLES = frozenset({"admin", "editor"})

    def __init__(self, content: str, role: str) -> None:
        self._document = SecureDocument(content)
        self.role = role
        print(f"DocumentProxy created for user role: {role}")

    @property
    def content(self) -> str:
        return self._document.content

    def display_content(self) -> str:
        print("Checking read permissions...")
        return self._document.display_content()

    def edit_content(self, new_content: str) -> bool:
        print("Checking write permissions...")
        if self.role in self.WRITER_ROLES:
            return self._document.edit_content(new_content)
        print(f"Access denied: {self.role} cannot edit documents")
        return False


# ----- Caching proxy -----


class DatabaseQuery(ABC):
    @abstractmethod
    def execute_query(self, query: str) -> str:
        """Run a query and return its result."""


class RealDatabase(DatabaseQuery):
    """A slow database that answers every query afresh."""

    def execute_query(self, query: str) -> str:
        print(f"Executing query on database (slow operation): {query}")
        return f"Result for: {query}"


class CachingDatabaseProxy(DatabaseQuery):
    """Remembers query results so repeated queries skip the database."""

    def __init__(self, database: DatabaseQuery | None = None) -> None:
        self._database = database if database is not None else RealDatabase()
        self._cache: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, query: object) -> bool:
        return query in self._cache

    def execute_query(self, query: str) -> str:
        if query in self._cache:
            print(f"Returning cached result for: {query}")
            return self._cache[query]
        print("Cache miss - executing real query")
        result = self._database.execute_query(query)
        self._cache[query] = result
        return result

    def clear_cache(self) -> None:
        self._cache.clear()
        print("Cache cleared")


# ----- Smart reference proxy -----


class NetworkResource(ABC):
    @abstractmethod
    def access(self) -> str:
        """Use the resource and return the line reported."""


class RealNetworkResource(NetworkResource):
    """A resource that connects when created."""

    def __init__(self, url: str) -> None:
        self.url = url
        print(f"Connected to: {url}")

    def access(self) -> str:
        return _emit(f"Accessing resource at: {self.url}")


class NetworkResourceProxy(NetworkResource):
    """Connects on first use, counts accesses and reports on closing."""

    WARNING_THRESHOLD = 5

    def __init__(self, url: str) -> None:
        self.url = url
        self._resource: RealNetworkResource | None = None
        self._access_count = 0
        self._closed = False

    @property
    def access_count(self) -> int:
        return self._access_count

    @property
    def connected(self) -> bool:
        return self._resource is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def access(self) -> str:
        if self._resource is None:
            print("Establishing connection...")
            self._resource = RealNetworkResource(self.url)
        self._access_count += 1
        print(f"[Proxy] Access #{self._access_count}")
        line = self._resource.access()
        if self._access_count >= self.WARNING_THRESHOLD:
            print("[Proxy] Warning: High access count detected!")
        return line

    def close(self) -> None:
        """Report usage and release the connection; later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        print(f"[Proxy] Total accesses: {self._access_count}")
        print("[Proxy] Cleaning up connection")
        self._resource = None

    def __enter__(self) -> NetworkResourceProxy:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


# ----- Remote proxy -----


class RemoteService(ABC):
    @abstractmethod
    def process_request(self, request: str) -> str:
        """Handle a request and return the response."""


class RealRemoteService(RemoteService):
    """The service as it runs on the server."""

    def process_request(self, request: str) -> str:
        return f"Server response for: {request}"


class RemoteServiceProxy(RemoteService):
    """Client-side stand-in that forwards requests to the server."""

    def __init__(self, address: str) -> None:
        self.address = address
        self._service = RealRemoteService()

    def process_request(self, request: str) -> str:
        print(f"Connecting to server: {self.address}")
        print("Sending request over network...")
        response = self._service.process_request(request)
        print("Receiving response...")
        return response


def main(argv: list[str] | None = None) -> int:
    """Run the proxy demonstration."""
    print("=== PROXY PATTERN DEMO ===")

    print("\n1. VIRTUAL PROXY (Lazy Loading):")
    print("=================================")
    print("\n[Creating image proxies]")
    image1: Image = ImageProxy("photo1.jpg")
    image2: Image = ImageProxy("photo2.jpg")

    print("\n[Displaying images]")
    image1.display()
    image1.display()
    image2.display()

    print("\n\n2. PROTECTION PROXY (Access Control):")
    print("======================================")
    print("\n[Admin user]")
    admin_doc: Document = DocumentProxy("Confidential Data", "admin")
    admin_doc.display_content()
    admin_doc.edit_content("Updated Data")

    print("\n[Viewer user]")
    viewer_doc: Document = DocumentProxy("Public Data", "viewer")
    viewer_doc.display_content()
    viewer_doc.edit_content("Trying to edit")

    print("\n\n3. CACHING PROXY:")
    print("=================")
    db = CachingDatabaseProxy()

    print("\n[First query]")
    print(db.execute_query("SELECT * FROM users"))
    print("\n[Same query again - from cache]")
    print(db.execute_query("SELECT * FROM users"))
    print("\n[Different query]")
    print(db.execute_query("SELECT * FROM products"))
    print("\n[First query again - still cached]")
    print(db.execute_query("SELECT * FROM users"))

    print("\n\n4. SMART REFERENCE PROXY:")
    print("=========================")
    with NetworkResourceProxy("https://api.example.com") as api:
        print("\n[Multiple accesses]")
        for _ in range(6):
            api.access()
        print(f"\n[Total access count: {api.access_count}]")

    print("\n\n5. REMOTE PROXY:")
    print("================")
    service: RemoteService = RemoteServiceProxy("192.168.1.100:8080")
    print("\n[Making remote call]")
    response = service.process_request("GET /data")
    print(f"Response: {response}")

    print("\n\n=== KEY TAKEAWAYS ===")
    print("1. Proxy CONTROLS ACCESS to another object")
    print("2. Proxy and real object implement same interface")
    print("3. Types: Virtual, Protection, Caching, Smart Reference, Remote")
    print("4. Virtual Proxy: Delays expensive object creation (lazy loading)")
    print("5. Protection Proxy: Controls access based on permissions")
    print("6. Caching Proxy: Stores results to avoid repeated expensive operations")
    print("7. Smart Reference: Adds extra functionality (logging, counting, etc.)")
    print("8. Client code doesn't know if it's using proxy or real object")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())