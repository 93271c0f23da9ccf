"""
Models package
MongoDB 콜렉션별 레포지토리

MongoDB Collections:
- users: 사용자 (인증 서비스 소유, 조회 전용)
- videos: 영상 메타데이터
- comments: 영상 댓글
- likes: 영상/댓글/트윗 좋아요
- tweets: 커뮤니티 게시글
- playlists: 재생목록
- subscriptions: 채널 구독
"""
