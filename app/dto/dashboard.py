from dataclasses import dataclass


@dataclass
class ChannelStatsDto:
    total_subscribers: int = 0
    total_videos: int = 0
    total_views: int = 0
    total_likes: int = 0
