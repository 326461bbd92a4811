"""User-facing strings for the download page."""

TEXT = {
    # Subtitles under the item heading, per channel
    "subtitle_latest": {
        "dev": "최신 개발 버전 (권장)",
        "stg": "최신 스테이징 버전 (권장)",
    },
    "subtitle_previous": {
        "dev": "이전 버전",
        "stg": "이전 스테이징 버전",
    },
    # Status column
    "status_latest": "🟢 최신",
    "status_previous": "🔵 이전",
    # Detail labels
    "version_label": "버전",
    "build_label": "빌드",
    "date_label": "출시일",
    "status_label": "상태",
    "download_button": "다운로드",
    # Shown inside a region when a channel has no builds
    "empty_list": "              <!-- 목록 없음 -->",
    # Branding
    "title_suffix": "APK 다운로드",
    "heading_suffix": "APK",
    # CLI
    "updated": "index.html updated from download folder.",
}
