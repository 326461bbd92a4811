from __future__ import annotations

import pytest

from apk_index.config import SiteConfig

INDEX_TEMPLATE = """<!doctype html>
<html lang="ko">
  <head>
    <meta charset="utf-8" />
    <title>예전 앱 APK 다운로드</title>
  </head>
  <body>
    <header>
      <h1>📦 예전 앱 APK</h1>
    </header>
    <section id="dev">
      <div class="app-list">
<!-- GENERATED DEV LIST START -->
              <!-- 목록 없음 -->
<!-- GENERATED DEV LIST END -->
      </div>
    </section>
    <section id="stg">
      <div class="app-list">
<!-- GENERATED STG LIST START -->
              <!-- 목록 없음 -->
<!-- GENERATED STG LIST END -->
      </div>
    </section>
  </body>
</html>
"""


@pytest.fixture
def config() -> SiteConfig:
    return SiteConfig(prefix="app", icon="🚀", display_name_ko="테스트앱")


@pytest.fixture
def index_template() -> str:
    return INDEX_TEMPLATE
