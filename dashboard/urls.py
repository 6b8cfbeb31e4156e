from django.urls import path

from dashboard.views import DailyNoteView, DashboardView, TrendAnalysisView

app_name = "dashboard"

urlpatterns = [
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("dashboard/trends/", TrendAnalysisView.as_view(), name="trends"),
    path("daily-notes/<str:date>/", DailyNoteView.as_view(), name="daily-note"),
]
