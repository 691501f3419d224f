"""
Channel Information Domain Model
"""


class ChannelInfo:
    """
    Domain model representing a resolved YouTube channel.
    Represents a VALID channel state only: the uploads playlist is always known.
    """

    def __init__(
        self,
        channel_id: str,
        title: str,
        uploads_playlist_id: str,
        description: str = "",
        custom_url: str = ""
    ):
        self.channel_id = channel_id
        self.title = title
        self.uploads_playlist_id = uploads_playlist_id
        self.description = description
        self.custom_url = custom_url

    def __repr__(self) -> str:
        return (
            f"ChannelInfo(title={self.title!r}, id={self.channel_id!r}, "
            f"uploads={self.uploads_playlist_id!r})"
        )
