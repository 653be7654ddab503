# game_ui.py
import math
import logging
import pygame
from game import GameSession
from words import WORD_SETS
from config import *

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
SCREEN_HOME = "home"
SCREEN_GAME = "game"
SCREEN_RESULTS = "results"


class GameUI:
    def __init__(self, language=DEFAULT_LANGUAGE, rng=None, catalog=None):
        self.language = language
        self.rng = rng
        self.catalog = catalog or WORD_SETS

        pygame.init()
        self.windowed_size = (SCREEN_WIDTH, SCREEN_HEIGHT)
        self.fullscreen = False
        self.screen = pygame.display.set_mode(self.windowed_size, pygame.RESIZABLE)
        pygame.display.set_caption("한·영 타자연습")

        # Fonts (SysFont falls back to the pygame default when none of the names exist)
        self.font = pygame.font.SysFont(FONT_NAMES, 24)
        self.hud_font = pygame.font.SysFont(FONT_NAMES, 22)
        self.stat_font = pygame.font.SysFont(FONT_NAMES, 40)
        self.title_font = pygame.font.SysFont(FONT_NAMES, 56)
        self.word_font = pygame.font.SysFont(FONT_NAMES, 72)
        self.input_font = pygame.font.SysFont(FONT_NAMES, 36)
        self.clock = pygame.time.Clock()

        # Retro/CRT overlay surfaces (cover whole window)
        self.scanline_surface = self._create_scanline_surface(self.screen.get_size())
        self.vignette_surface = self._create_vignette_surface(self.screen.get_size())
        self.flicker_phase = 0

        self.current_screen = SCREEN_HOME
        self.session = None
        self.results = None
        self.results_shown_at = 0
        self.input_text = ""
        self.composition = ""           # IME text still being composed (Hangul)
        self.toasts = []

    # ---------- Retro helpers ----------
    def _rebuild_overlays(self):
        size = self.screen.get_size()
        self.scanline_surface = self._create_scanline_surface(size)
        self.vignette_surface = self._create_vignette_surface(size)

    def _create_scanline_surface(self, size):
        width, height = size
        scan = pygame.Surface((width, height), pygame.SRCALPHA)
        scan.set_alpha(90)
        for y in range(0, height, 3):
            pygame.draw.line(scan, (0, 0, 0, 140), (0, y), (width, y))
        return scan

    def _create_vignette_surface(self, size):
        width, height = size
        vignette = pygame.Surface((width, height), pygame.SRCALPHA)
        for i in range(10):
            alpha = int(18 - i * 1.8)
            pygame.draw.rect(
                vignette,
                (0, 0, 0, alpha),
                pygame.Rect(0 + i, 0 + i, width - i * 2, height - i * 2),
                border_radius=6,
            )
        return vignette

    def _apply_crt_overlay(self):
        # Subtle flicker
        self.flicker_phase = (self.flicker_phase + 1) % 120
        flicker_alpha = 10 + int(10 * abs(math.sin(self.flicker_phase / 12)))
        width, height = self.screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((255, 255, 255, flicker_alpha))
        self.screen.blit(overlay, (0, 0))
        if self.scanline_surface.get_size() != (width, height):
            self._rebuild_overlays()
        self.screen.blit(self.scanline_surface, (0, 0))
        self.screen.blit(self.vignette_surface, (0, 0))

    def _draw_frame(self):
        width, height = self.screen.get_size()
        outer_rect = pygame.Rect(6, 6, width - 12, height - 12)
        inner_rect = pygame.Rect(10, 10, width - 20, height - 20)
        pygame.draw.rect(self.screen, COLORS["border"], outer_rect)
        pygame.draw.rect(self.screen, COLORS["backdrop"], inner_rect)
        pygame.draw.rect(self.screen, COLORS["hud_text"], inner_rect, width=3)

    def _draw_centered(self, text, font, y, color=COLORS["hud_text"], shadow=(20, 20, 20)):
        width, _ = self.screen.get_size()
        surf = font.render(text, True, color)
        x = (width - surf.get_width()) // 2
        if shadow:
            self.screen.blit(font.render(text, True, shadow), (x + 3, y + 3))
        self.screen.blit(surf, (x, y))
        return surf.get_rect(topleft=(x, y))

    def _draw_panel(self, rect, border=COLORS["border"]):
        pygame.draw.rect(self.screen, COLORS["panel"], rect)
        pygame.draw.rect(self.screen, border, rect, 2)

    # ---------- Toasts ----------
    def _add_toast(self, text, duration_ms=1200, color=COLORS["hud_text"]):
        expiry = pygame.time.get_ticks() + duration_ms
        self.toasts.append({"text": text, "expiry": expiry, "color": color})

    def _draw_toasts(self):
        now = pygame.time.get_ticks()
        self.toasts = [t for t in self.toasts if t["expiry"] > now]
        width, _ = self.screen.get_size()
        for i, toast in enumerate(reversed(self.toasts[-3:])):
            text_surf = self.hud_font.render(toast["text"], True, toast["color"])
            padding = 8
            w = text_surf.get_width() + padding * 2
            h = text_surf.get_height() + padding
            x = (width - w) // 2
            y = 18 + i * (h + 6)
            pygame.draw.rect(self.screen, COLORS["panel"], pygame.Rect(x, y, w, h))
            pygame.draw.rect(self.screen, toast["color"], pygame.Rect(x, y, w, h), 2)
            self.screen.blit(text_surf, (x + padding, y + padding // 2))

    def _draw_progress_bar(self, x, y, w, h, pct):
        pct = max(0.0, min(1.0, pct))
        back = pygame.Rect(x, y, w, h)
        pygame.draw.rect(self.screen, COLORS["panel"], back)
        pygame.draw.rect(self.screen, COLORS["hud_text"], pygame.Rect(x, y, int(w * pct), h))
        pygame.draw.rect(self.screen, COLORS["border"], back, 2)

    # ---------- Timer ----------
    def _arm_timer(self):
        pygame.time.set_timer(TICK_EVENT, TICK_MS)

    def _disarm_timer(self):
        pygame.time.set_timer(TICK_EVENT, 0)

    # ---------- Session flow ----------
    def _new_session(self):
        self.session = GameSession(
            self.language,
            rng=self.rng,
            catalog=self.catalog,
            on_complete=self._on_game_complete,
        )
        self.results = None
        self.input_text = ""
        self.composition = ""
        self.current_screen = SCREEN_GAME
        pygame.key.start_text_input()

    def _on_game_complete(self, result):
        self._disarm_timer()
        self.results = result
        self.results_shown_at = pygame.time.get_ticks()
        self.current_screen = SCREEN_RESULTS
        pygame.key.stop_text_input()

    def _back_to_home(self):
        # stop tick delivery before dropping the session
        self._disarm_timer()
        if self.session is not None:
            self.session.cancel()
        self.session = None
        self.results = None
        self.current_screen = SCREEN_HOME
        pygame.key.stop_text_input()

    def _submit(self):
        before = self.session.state
        after = self.session.submit_answer(self.input_text + self.composition)
        self.input_text = ""
        self.composition = ""

        if not before.started:
            if after.started:
                self._arm_timer()
            return
        if after.ended:
            return

        if after.combo > before.combo:
            self._add_toast(f"+{after.score - before.score}", color=COLORS["good"])
        else:
            self._add_toast("틀렸어요!", color=COLORS["bad"])
        if after.difficulty != before.difficulty:
            self._add_toast(f"난이도 상승: {DIFFICULTY_LABELS[after.difficulty]}", duration_ms=2000,
                            color=COLORS[after.difficulty])

    # ---------- Screens ----------
    def _render_home_screen(self):
        width, height = self.screen.get_size()
        self.screen.fill(COLORS["backdrop"])
        self._draw_frame()

        self._draw_centered("아동용 한·영 타자연습", self.title_font, 90)
        self._draw_centered("재미있게 배우는 타자 연습 게임", self.font, 160, shadow=None)

        panel_w = min(560, width - 120)
        panel = pygame.Rect((width - panel_w) // 2, 220, panel_w, 300)
        self._draw_panel(panel)
        header = self.font.render("언어 선택:", True, COLORS["hud_text"])
        self.screen.blit(header, (panel.x + 20, panel.y + 20))

        button_w = (panel_w - 60) // 2
        for i, language in enumerate(LANGUAGES):
            rect = pygame.Rect(panel.x + 20 + i * (button_w + 20), panel.y + 70, button_w, 70)
            selected = language == self.language
            pygame.draw.rect(self.screen, COLORS["hud_backdrop"] if selected else COLORS["panel"], rect)
            pygame.draw.rect(self.screen, COLORS["border"] if selected else (90, 90, 90), rect, 3)
            label = self.stat_font.render(f"{i + 1}. {LANGUAGE_LABELS[language]}", True, COLORS["hud_text"])
            self.screen.blit(label, (rect.centerx - label.get_width() // 2, rect.centery - label.get_height() // 2))

        lines = [
            "←/→ 또는 1/2: 언어 선택",
            "Enter: 게임 시작",
            f"{SESSION_LENGTH}초 동안 최대한 많은 단어를 입력하세요!",
            "연속으로 맞히면 보너스 점수!",
        ]
        for i, text in enumerate(lines):
            line = self.hud_font.render(text, True, (200, 200, 200))
            self.screen.blit(line, (panel.x + 20, panel.y + 170 + i * 28))

        self._apply_crt_overlay()
        pygame.display.flip()

    def _draw_stat_card(self, rect, value, label, color):
        self._draw_panel(rect)
        value_surf = self.stat_font.render(str(value), True, color)
        label_surf = self.hud_font.render(label, True, (200, 200, 200))
        self.screen.blit(value_surf, (rect.centerx - value_surf.get_width() // 2, rect.y + 10))
        self.screen.blit(label_surf, (rect.centerx - label_surf.get_width() // 2, rect.bottom - 30))

    def _render_game_screen(self):
        state = self.session.state
        width, height = self.screen.get_size()
        self.screen.fill(COLORS["backdrop"])
        self._draw_frame()

        self._draw_centered(f"{LANGUAGE_LABELS[state.language]} 타자연습", self.font, 30)
        esc = self.hud_font.render("Esc: 홈으로", True, (200, 200, 200))
        self.screen.blit(esc, (30, 32))

        # Stat cards
        gap = 16
        card_w = (min(900, width - 80) - gap * 3) // 4
        start_x = (width - (card_w * 4 + gap * 3)) // 2
        cards = [
            (state.time_remaining, "초", COLORS["hud_text"]),
            (state.score, "점수", COLORS["medium"]),
            (state.combo, "콤보", COLORS["easy"]),
            (DIFFICULTY_LABELS[state.difficulty], "난이도", COLORS[state.difficulty]),
        ]
        for i, (value, label, color) in enumerate(cards):
            self._draw_stat_card(pygame.Rect(start_x + i * (card_w + gap), 80, card_w, 100), value, label, color)

        elapsed = state.session_length - state.time_remaining
        self._draw_progress_bar(start_x, 200, card_w * 4 + gap * 3, 16, elapsed / float(state.session_length or 1))

        panel_w = min(720, width - 120)
        panel = pygame.Rect((width - panel_w) // 2, 240, panel_w, height - 300)
        self._draw_panel(panel)

        if not state.started:
            self._draw_centered("준비되셨나요?", self.title_font, panel.y + 60)
            self._draw_centered("Enter를 눌러 게임을 시작하세요!", self.font, panel.y + 150, shadow=None)
        else:
            self._draw_centered("다음 단어를 입력하세요:", self.hud_font, panel.y + 20, shadow=None)
            self._draw_centered(state.current_word, self.word_font, panel.y + 60, color=COLORS[state.difficulty])

            input_rect = pygame.Rect(panel.x + 40, panel.y + 180, panel.w - 80, 56)
            pygame.draw.rect(self.screen, (0, 0, 0), input_rect)
            pygame.draw.rect(self.screen, COLORS["border"], input_rect, 2)
            typed = self.input_font.render(self.input_text + self.composition, True, COLORS["hud_text"])
            tx = input_rect.centerx - typed.get_width() // 2
            self.screen.blit(typed, (tx, input_rect.y + (input_rect.h - typed.get_height()) // 2))
            pygame.key.set_text_input_rect(input_rect)
            # blinking caret
            if (pygame.time.get_ticks() // 500) % 2 == 0:
                cx = tx + typed.get_width() + 2
                pygame.draw.line(self.screen, COLORS["hud_text"], (cx, input_rect.y + 12), (cx, input_rect.bottom - 12), 2)

            if state.combo > 0:
                streak = f"{state.combo} 연속 성공!"
                if state.combo >= COMBO_STEP:
                    streak += " 보너스 점수!"
                self._draw_centered(streak, self.font, panel.y + 260, color=COLORS["good"], shadow=None)

        self._draw_toasts()
        self._apply_crt_overlay()
        pygame.display.flip()

    def _render_results_screen(self):
        width, height = self.screen.get_size()
        self.screen.fill(COLORS["backdrop"])
        self._draw_frame()

        # reveal score, accuracy, wpm, then grade, one every 800ms
        phase = (pygame.time.get_ticks() - self.results_shown_at) // 800 + 1

        self._draw_centered("게임 결과", self.title_font, 60)
        self._draw_centered("수고하셨습니다!", self.font, 130, shadow=None)

        gap = 20
        card_w = (min(840, width - 80) - gap * 2) // 3
        start_x = (width - (card_w * 3 + gap * 2)) // 2
        cards = [
            (self.results.total_score, "총점", COLORS["medium"]),
            (f"{self.results.accuracy}%", "정확도", COLORS["easy"]),
            (self.results.wpm, "WPM", COLORS["hud_text"]),
        ]
        for i, (value, label, color) in enumerate(cards):
            if phase > i:
                self._draw_stat_card(pygame.Rect(start_x + i * (card_w + gap), 180, card_w, 110), value, label, color)

        if phase > 3:
            grade = self.results.grade
            panel = pygame.Rect(start_x, 320, card_w * 3 + gap * 2, 170)
            self._draw_panel(panel, border=COLORS[grade])
            self._draw_centered(grade, self.title_font, panel.y + 25, color=COLORS[grade])
            self._draw_centered(GRADE_MESSAGES[grade], self.font, panel.y + 110, shadow=None)

        if (pygame.time.get_ticks() // 600) % 3 != 0:
            self._draw_centered("Enter: 다시 하기    Esc: 홈으로 가기", self.hud_font, height - 80, shadow=None)

        self._apply_crt_overlay()
        pygame.display.flip()

    def render(self):
        if self.current_screen == SCREEN_GAME and self.session is not None:
            self._render_game_screen()
        elif self.current_screen == SCREEN_RESULTS and self.results is not None:
            self._render_results_screen()
        else:
            self._render_home_screen()

    # ---------- Event handling ----------
    def _toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(self.windowed_size, pygame.RESIZABLE)
        self._rebuild_overlays()

    def _handle_home_key(self, event):
        if event.key in (pygame.K_LEFT, pygame.K_1):
            self.language = LANGUAGES[0]
        elif event.key in (pygame.K_RIGHT, pygame.K_2):
            self.language = LANGUAGES[1]
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._new_session()

    def _handle_game_key(self, event):
        if event.key == pygame.K_ESCAPE:
            self._back_to_home()
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._submit()
        elif event.key == pygame.K_BACKSPACE and not self.composition:
            self.input_text = self.input_text[:-1]

    def _handle_results_key(self, event):
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._new_session()
        elif event.key == pygame.K_ESCAPE:
            self._back_to_home()

    def handle_event(self, event):
        if event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
            self._rebuild_overlays()
        elif event.type == TICK_EVENT:
            if self.session is not None:
                self.session.tick()
        elif event.type == pygame.TEXTEDITING and self.current_screen == SCREEN_GAME:
            self.composition = event.text
        elif event.type == pygame.TEXTINPUT and self.current_screen == SCREEN_GAME:
            if self.session is not None and self.session.state.started:
                self.input_text += event.text
            self.composition = ""
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_F11:
                self._toggle_fullscreen()
            elif self.current_screen == SCREEN_HOME:
                self._handle_home_key(event)
            elif self.current_screen == SCREEN_GAME:
                self._handle_game_key(event)
            elif self.current_screen == SCREEN_RESULTS:
                self._handle_results_key(event)

    def run(self):
        running = True
        while running:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self.handle_event(event)
            self.render()

        self._back_to_home()
        pygame.quit()
