from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.dashboard import ChannelStatsResponseSchema, ChannelVideosResponseSchema
from app.services.dashboard_service import DashboardService
from common.decorator.auth_decorators import login_required

dashboard_blueprint = Blueprint(
    'dashboard',
    __name__,
    url_prefix='/api/v1/dashboard',
    description='채널 대시보드 API'
)


@dashboard_blueprint.route('/stats', methods=['GET'])
@login_required
@dashboard_blueprint.response(200, ChannelStatsResponseSchema)
@dashboard_blueprint.doc(security=[{"BearerAuth": []}])
def get_channel_stats():
    stats = DashboardService.get_channel_stats(g.user_id)

    return ApiResponse(200, stats, "Channel stats fetched successfully")


@dashboard_blueprint.route('/videos', methods=['GET'])
@login_required
@dashboard_blueprint.response(200, ChannelVideosResponseSchema)
@dashboard_blueprint.doc(security=[{"BearerAuth": []}])
def get_channel_videos():
    videos = DashboardService.get_channel_videos(g.user_id)

    return ApiResponse(200, videos, "Channel videos fetched successfully")
