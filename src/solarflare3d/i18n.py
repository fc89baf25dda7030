"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "태양 플레어 3D",
        "en": "Solar Flare 3D",
    },
    "app_title": {
        "ko": "🌞 태양 플레어 3D 시각화",
        "en": "🌞 Solar Flare 3D Visualization",
    },
    "app_subtitle": {
        "ko": "NASA의 실제 태양 플레어 데이터를 3D 태양 모델 위에 표시합니다.",
        "en": "Real NASA solar flare data mapped onto a 3D Sun model.",
    },
    "label_date": {
        "ko": "검색 시작일",
        "en": "Search from Date",
    },
    "loading": {
        "ko": "🔄 플레어 데이터를 불러오는 중",
        "en": "🔄 Loading flare data...",
    },
    "error_fetch": {
        "ko": "❌ 데이터를 불러오지 못했어요. ({error})",
        "en": "❌ {error}",
    },
    "controls_title": {
        "ko": "💡 조작 방법",
        "en": "💡 Controls",
    },
    "controls_body": {
        "ko": "회전: 클릭 후 드래그<br>확대: 마우스 휠/핀치<br>플레어 색상: 🔴 X | 🟠 M | 🟡 C<br>마커는 분출 위치를 나타냅니다",
        "en": "Rotate: Click and drag<br>Zoom: Mouse wheel/pinch<br>Flare colors: 🔴 X | 🟠 M | 🟡 C<br>Marker shows eruption",
    },
    "credit": {
        "ko": "NASA DONKI 데이터",
        "en": "NASA DONKI Data",
    },
    "details_title": {
        "ko": "⚡ 플레어 상세",
        "en": "⚡ Flare Details",
    },
    "row_id": {
        "ko": "플레어 ID",
        "en": "Flare ID",
    },
    "row_class": {
        "ko": "등급",
        "en": "Class",
    },
    "row_start": {
        "ko": "시작",
        "en": "Start",
    },
    "row_peak": {
        "ko": "최대",
        "en": "Peak",
    },
    "row_region": {
        "ko": "활동 영역",
        "en": "Region",
    },
    "row_source": {
        "ko": "위치",
        "en": "Source",
    },
    "row_instruments": {
        "ko": "관측 장비",
        "en": "Instruments",
    },
    "linked_title": {
        "ko": "🔗 연관 이벤트",
        "en": "🔗 Linked Events",
    },
    "linked_none": {
        "ko": "연관 이벤트 없음",
        "en": "No linked events",
    },
    "no_flare": {
        "ko": "선택한 기간에 플레어 데이터가 없어요.",
        "en": "No flare data found for selected date range.",
    },
    "no_marker": {
        "ko": "이 플레어는 위치 정보가 없어 태양 위에 표시할 수 없어요.",
        "en": "This flare has no source location, so no marker is drawn.",
    },
    "not_available": {
        "ko": "없음",
        "en": "N/A",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
