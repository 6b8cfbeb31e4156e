import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from dashboard.serializers import (
    DailyNoteSerializer,
    TrendInputSerializer,
    TrendOutputSerializer,
)
from dashboard.services.trends import TrendAnalysisError, analyze_trends
from dashboard.state import HotelState
from room.views import DATE_PARAMETER, parse_day, selected_day
from store.adapter import default_store
from store.exceptions import raise_for_result

logger = logging.getLogger(__name__)

TREND_FAILURE_MESSAGE = "Trend analysis is unavailable right now. Please try again later."


class DashboardView(APIView):
    @extend_schema(
        summary="Dashboard snapshot",
        description=(
                "Every collection as the front desk sees it right now, with "
                "lapsed stays already released, plus headline figures and the "
                "summary for the selected day (today by default)."
        ),
        parameters=[DATE_PARAMETER],
    )
    def get(self, request):
        day = selected_day(request)
        state = HotelState.load(default_store)
        return Response(
            {
                "loading": state.loading,
                "sample_data": sorted(state.seeded),
                "summary": state.summary(),
                "daily": state.daily_summary(day),
                "collections": state.snapshot(),
            }
        )


class TrendAnalysisView(APIView):
    @extend_schema(
        summary="AI trend insight",
        request=TrendInputSerializer,
        responses={
            200: TrendOutputSerializer,
            502: OpenApiResponse(description="The analysis service failed"),
        },
    )
    def post(self, request):
        serializer = TrendInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            answer = analyze_trends(serializer.validated_data)
        except TrendAnalysisError:
            return Response(
                {"detail": TREND_FAILURE_MESSAGE}, status=status.HTTP_502_BAD_GATEWAY
            )

        output = TrendOutputSerializer(data=answer)
        if not output.is_valid():
            logger.error(f"Trend analysis answer rejected: {output.errors}")
            return Response(
                {"detail": TREND_FAILURE_MESSAGE}, status=status.HTTP_502_BAD_GATEWAY
            )
        return Response(output.validated_data)


class DailyNoteView(APIView):
    def _invalid_date(self):
        return Response(
            {"detail": "Invalid date format. Use YYYY-MM-DD."},
            status=status.HTTP_400_BAD_REQUEST,
        )

    @extend_schema(responses={200: DailyNoteSerializer})
    def get(self, request, date):
        day = parse_day(date)
        if day is None:
            return self._invalid_date()

        content = default_store.get_singleton("dailyNotes", day.isoformat())
        return Response(DailyNoteSerializer({"date": day, "content": content}).data)

    @extend_schema(request=DailyNoteSerializer, responses={200: DailyNoteSerializer})
    def put(self, request, date):
        day = parse_day(date)
        if day is None:
            return self._invalid_date()

        serializer = DailyNoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        content = serializer.validated_data["content"]

        result = default_store.set_singleton("dailyNotes", day.isoformat(), content)
        raise_for_result(result)
        return Response(DailyNoteSerializer({"date": day, "content": content}).data)
