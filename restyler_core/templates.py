"""
Static markup used by the renderer and the cosmetic adjuster.
"""

import html

from .contract import (
    PANEL_CLASS,
    SLOT_ACTION,
    SLOT_DESCRIPTION,
    SLOT_ICON,
    SLOT_TITLE,
    slot_class,
)


ICON_SUCCESS = """
<span class="pg-icon-style">
  <span class="pg-icon-submission-success">
    <span class="glyphicon glyphicon-ok-circle" aria-hidden="true"></span>
  </span>
</span>
"""

ICON_PENDING = """
<span class="pg-icon-style">
  <span class="pg-icon-submission-pending">
    <span class="glyphicon glyphicon-minus" aria-hidden="true"></span>
  </span>
</span>
"""

REQUIRED_GLYPH = '<span style="color:red">*</span>'


def title_html(text: str, is_required: bool) -> str:
    text = html.escape(text)
    if is_required:
        return f'<h3 class="pg-checklist-item-title">{REQUIRED_GLYPH} {text}</h3>'
    return f'<h3 class="pg-checklist-item-title">{text}</h3>'


def panel_html(index: int) -> str:
    """Panel skeleton with the four slots tagged by ``index``."""
    return f"""
<div class="{PANEL_CLASS} panel panel-default" style="border-radius:0;border-top-width:0;border-left-width:0;border-right-width:0">
  <div class="panel-body">
    <div class="pg-flex-container">
      <div class="pg-flex-item-shrink">
        <div class="{slot_class(SLOT_ICON, index)}"></div>
      </div>
      <div class="pg-flex-item-grow" style="margin-top:10px">
        <div class="pg-flex-container-column">
          <div class="pg-flex-item-grow">
            <div class="pg-flex-container">
              <div class="pg-flex-item-shrink">
                <div class="{slot_class(SLOT_TITLE, index)}"></div>
              </div>
              <div class="pg-flex-item-grow">
                <div class="pg-action-styles">
                  <div class="{slot_class(SLOT_ACTION, index)}"></div>
                </div>
              </div>
            </div>
          </div>
          <div class="pg-flex-item-grow">
            <div class="{slot_class(SLOT_DESCRIPTION, index)}"></div>
          </div>
        </div>
      </div>
    </div>
  </div>
</div>
"""


# Page-level cosmetics

FONT_STYLESHEETS = (
    "https://fonts.googleapis.com/css?family=Source+Sans+Pro:200,200i,300,300i,400,400i,600,600i,700,700i,900,900i&display=swap",
    "https://fonts.googleapis.com/css2?family=Playfair+Display:wght@600&display=swap",
)

NAVBAR_STYLE = """
<style>
  .recruit-navbar .main-navbar > li:hover:after,
  .recruit-navbar .main-navbar > li.active:after {
    height: 0;
    width: 0;
  }
</style>
"""

APPLICATION_TITLE = '<h1 class="pg-application-title">My Application</h1>'

FOOTER = """
<div class="pg-application-footer-background">
  <div class="pg-footer-container">
    <div class="pg-footer-logo"></div>
    <h1 class="pg-application-footer-title">Discover Your Calling</h1>
  </div>
</div>
"""


def stylesheet_link(href: str) -> str:
    return f'<link rel="stylesheet" href="{html.escape(href, quote=True)}">'
