from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """Token authentication reading `Authorization: Bearer <token>`.

    A stored token is the user's session; unknown tokens fail with 401.
    """

    keyword = "Bearer"
