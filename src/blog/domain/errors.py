class BlogError(Exception):
    """Base error for the blog builder."""


class ConfigurationError(BlogError):
    pass


class ContentError(BlogError):
    pass


class RenderError(BlogError):
    pass


class PublishError(BlogError):
    pass
