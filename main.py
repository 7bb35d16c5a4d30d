# main.py
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QFileDialog, QMessageBox, QComboBox,
    QCheckBox, QGroupBox, QRadioButton, QButtonGroup, QSpinBox,
    QDialog, QListWidget, QListWidgetItem, QLineEdit
)
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt, QThread, QTimer, pyqtSignal

from config import MAX_QUESTION_COUNT
from exam import (
    ExamSession, correct_count, difficulty_label, filter_questions, format_clock,
    format_duration, history_summary, score_grade, select_exam_questions,
    sorted_history, sorted_wrong_answers, wrong_answer_questions,
)
from importer import SUPPORTED_EXTENSIONS, import_files
from logging_config import configure_logging
from models import DIFFICULTIES, ExamRecord, ParseResult, Question
from storage import StateRepository, bank_from_result

logger = logging.getLogger(__name__)

ALL = "all"


def _format_time(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")


class ImportWorker(QThread):
    """后台线程解析题库文件，完成后通过 done 信号交回 [(路径, 解析结果), ...]"""
    done = pyqtSignal(list)

    def __init__(self, files: List[str], parent=None):
        super().__init__(parent)
        self.files = list(files)

    def run(self):
        self.done.emit(import_files(self.files))


def save_imported_banks(repository: StateRepository,
                        results: List[Tuple[Path, ParseResult]]) -> Tuple[List[str], List[str]]:
    """解析成功的文件逐个存为题库，返回 (成功行, 失败行)"""
    ok_lines, fail_lines = [], []
    for path, result in results:
        if not result.success:
            fail_lines.append(f"《{path.name}》：{result.error or '未识别到题目'}")
            continue
        try:
            repository.add_question_bank(bank_from_result(result, path.name))
        except OSError as e:
            fail_lines.append(f"《{path.name}》：保存失败 {e}")
            continue
        ok_lines.append(f"《{path.name}》：{len(result.questions)} 题")
    return ok_lines, fail_lines


def _option_lines(q: Question, user_answer: str = "") -> List[str]:
    lines = []
    for letter, text in zip(q.option_letters(), q.options):
        mark = ""
        if letter == q.correct_answer:
            mark = " ✅"
        elif letter == user_answer:
            mark = " ❌"
        lines.append(f"{letter}. {text}{mark}")
    return lines


class HistoryDialog(QDialog):
    """考试记录：统计 + 列表 + 删除"""

    def __init__(self, repository: StateRepository, parent=None):
        super().__init__(parent)
        self.repository = repository
        self.setWindowTitle("考试记录")
        self.resize(640, 480)

        layout = QVBoxLayout(self)
        self.lbl_summary = QLabel("")
        layout.addWidget(self.lbl_summary)
        self.list = QListWidget()
        self.list.currentItemChanged.connect(self._show_detail)
        layout.addWidget(self.list)
        self.lbl_detail = QLabel("")
        self.lbl_detail.setWordWrap(True)
        layout.addWidget(self.lbl_detail)

        btn_delete = QPushButton("删除记录")
        btn_delete.clicked.connect(self._delete_selected)
        layout.addWidget(btn_delete)
        self._reload()

    def _reload(self):
        history = sorted_history(self.repository.load().exam_history)
        s = history_summary(history)
        self.lbl_summary.setText(
            f"已完成 {s['completed']} 场　平均分 {s['average']}　"
            f"最高 {s['highest']}　最低 {s['lowest']}"
        )
        self.list.clear()
        for record in history:
            score = "-" if record.score is None else str(record.score)
            item = QListWidgetItem(
                f"{record.title}　{_format_time(record.start_time)}　"
                f"{score} 分（{score_grade(record.score)}）　"
                f"用时 {format_duration(record.start_time, record.end_time)}"
            )
            item.setData(Qt.UserRole, record)
            self.list.addItem(item)

    def _show_detail(self, item, _previous=None):
        if item is None:
            self.lbl_detail.clear()
            return
        record: ExamRecord = item.data(Qt.UserRole)
        self.lbl_detail.setText(
            f"共 {len(record.questions)} 题，答对 {correct_count(record)} 题"
        )

    def _delete_selected(self):
        item = self.list.currentItem()
        if item is None:
            return
        record: ExamRecord = item.data(Qt.UserRole)
        reply = QMessageBox.question(self, "确认", f"删除考试记录《{record.title}》？")
        if reply != QMessageBox.Yes:
            return
        try:
            self.repository.delete_exam_record(record.id)
        except OSError as e:
            QMessageBox.warning(self, "错误", f"删除失败:\n{e}")
            return
        self._reload()


class WrongAnswersDialog(QDialog):
    """错题本：搜索、按分类过滤、查看、移除"""

    def __init__(self, repository: StateRepository, parent=None):
        super().__init__(parent)
        self.repository = repository
        self.setWindowTitle("错题本")
        self.resize(640, 520)

        layout = QVBoxLayout(self)
        filter_row = QHBoxLayout()
        self.ed_search = QLineEdit()
        self.ed_search.setPlaceholderText("搜索题目内容")
        self.ed_search.textChanged.connect(self._reload)
        filter_row.addWidget(self.ed_search)
        self.cb_category = QComboBox()
        self.cb_category.currentIndexChanged.connect(self._reload)
        filter_row.addWidget(self.cb_category)
        layout.addLayout(filter_row)

        self.list = QListWidget()
        self.list.currentItemChanged.connect(self._show_detail)
        layout.addWidget(self.list)
        self.lbl_detail = QLabel("")
        self.lbl_detail.setWordWrap(True)
        self.lbl_detail.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        layout.addWidget(self.lbl_detail)

        btn_remove = QPushButton("移出错题本")
        btn_remove.clicked.connect(self._remove_selected)
        layout.addWidget(btn_remove)

        self._fill_categories()
        self._reload()

    def _fill_categories(self):
        self.cb_category.blockSignals(True)
        self.cb_category.clear()
        self.cb_category.addItem("全部分类", ALL)
        cats = {}
        for w in self.repository.load().wrong_answers:
            cats.setdefault(w.question.category)
        for cat in cats:
            self.cb_category.addItem(cat, cat)
        self.cb_category.blockSignals(False)

    def _reload(self, *_):
        items = sorted_wrong_answers(
            self.repository.load().wrong_answers,
            search=self.ed_search.text().strip(),
            category=self.cb_category.currentData() or ALL,
        )
        self.list.clear()
        for w in items:
            item = QListWidgetItem(f"[错 {w.count} 次] {w.question.content}")
            item.setData(Qt.UserRole, w)
            self.list.addItem(item)

    def _show_detail(self, item, _previous=None):
        if item is None:
            self.lbl_detail.clear()
            return
        w = item.data(Qt.UserRole)
        q = w.question
        text = [q.content, ""] + _option_lines(q, w.user_answer)
        text.append("")
        text.append(f"你的答案：{w.user_answer or '未作答'}　正确答案：{q.correct_answer}")
        text.append(f"分类：{q.category}　难度：{difficulty_label(q.difficulty)}　"
                    f"最近：{_format_time(w.timestamp)}")
        if q.explanation:
            text.append(f"解析：{q.explanation}")
        self.lbl_detail.setText("\n".join(text))

    def _remove_selected(self):
        item = self.list.currentItem()
        if item is None:
            return
        try:
            self.repository.remove_wrong_answer(item.data(Qt.UserRole).question.id)
        except OSError as e:
            QMessageBox.warning(self, "错误", f"移除失败:\n{e}")
            return
        self._fill_categories()
        self._reload()


class ExamApp(QMainWindow):
    # 设计稿基准尺寸与字号
    BASE_WIDTH = 900
    BASE_HEIGHT = 640
    BASE_FONT = 12          # pt
    MAX_OPTIONS = 4

    def __init__(self, repository: Optional[StateRepository] = None):
        super().__init__()
        self.setWindowTitle("考试练习")
        self.resize(self.BASE_WIDTH, self.BASE_HEIGHT)

        # ----------------- 数据 -----------------
        self.repository = repository or StateRepository()
        self.session: Optional[ExamSession] = None
        self.import_worker: Optional[ImportWorker] = None
        self.current_font_size = self.BASE_FONT

        self.clock = QTimer(self)
        self.clock.setInterval(1000)
        self.clock.timeout.connect(self._update_progress)

        # ----------------- UI -----------------
        self._init_ui()
        self._apply_style()
        self._load_settings()
        self.refresh_filters()
        self._set_exam_controls(False)
        self.adjust_ui_scaling()

    # -------------------------------------------------
    # 窗口大小变化时自动重新计算 UI 缩放
    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.adjust_ui_scaling()

    def adjust_ui_scaling(self):
        """根据当前窗口尺寸动态调整字体、按钮高度"""
        factor = min(self.width() / self.BASE_WIDTH, self.height() / self.BASE_HEIGHT)

        new_pt = max(8, int(self.BASE_FONT * factor))   # 最小 8pt
        font = QFont()
        font.setPointSize(new_pt)
        self.current_font_size = new_pt

        for w in self._scaled_widgets():
            w.setFont(font)
        for rb in self.opt_radios:
            rb.setFont(font)
            rb.setStyleSheet(f"font-size: {new_pt}pt; padding: 6px 12px;")

        btn_h = max(24, int(30 * factor))
        for btn in self._buttons():
            btn.setMinimumHeight(btn_h)
        self.opt_box.setMinimumHeight(btn_h * len(self.opt_radios))

        # 题干使用富文本，字号需要重新渲染
        if self.session is not None:
            self.show_current_question()
        self.update()

    def _buttons(self) -> List[QPushButton]:
        return [self.btn_upload, self.btn_delete_bank, self.btn_history, self.btn_wrong,
                self.btn_start, self.btn_prev, self.btn_next, self.btn_mark, self.btn_submit]

    def _scaled_widgets(self) -> List[QWidget]:
        return self._buttons() + [
            self.lbl_progress, self.lbl_question, self.lbl_feedback,
            self.cb_bank, self.cb_category, self.cb_difficulty, self.sp_count,
            self.chk_random, self.chk_wrong, self.chk_explain,
        ]

    # -------------------------------------------------
    def _init_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(32, 24, 32, 24)
        main_layout.setSpacing(14)
        central.setLayout(main_layout)

        # ---------- 题库管理 ----------
        bank_row = QHBoxLayout()
        bank_row.setSpacing(12)
        main_layout.addLayout(bank_row)

        self.btn_upload = QPushButton("导入题库")
        self.btn_upload.clicked.connect(self.upload_bank)
        bank_row.addWidget(self.btn_upload)

        self.cb_bank = QComboBox()
        self.cb_bank.setMinimumWidth(160)
        bank_row.addWidget(self.cb_bank)

        self.btn_delete_bank = QPushButton("删除题库")
        self.btn_delete_bank.clicked.connect(self.delete_bank)
        bank_row.addWidget(self.btn_delete_bank)

        self.btn_history = QPushButton("考试记录")
        self.btn_history.clicked.connect(self.show_history)
        bank_row.addWidget(self.btn_history)

        self.btn_wrong = QPushButton("错题本")
        self.btn_wrong.clicked.connect(self.show_wrong_answers)
        bank_row.addWidget(self.btn_wrong)

        # ---------- 考试设置 ----------
        setting_row = QHBoxLayout()
        setting_row.setSpacing(12)
        main_layout.addLayout(setting_row)

        self.cb_category = QComboBox()
        self.cb_category.setMinimumWidth(120)
        setting_row.addWidget(self.cb_category)

        self.cb_difficulty = QComboBox()
        self.cb_difficulty.addItem("全部难度", ALL)
        for key in DIFFICULTIES:
            self.cb_difficulty.addItem(difficulty_label(key), key)
        setting_row.addWidget(self.cb_difficulty)

        self.sp_count = QSpinBox()
        self.sp_count.setRange(1, MAX_QUESTION_COUNT)
        self.sp_count.setSuffix(" 题")
        setting_row.addWidget(self.sp_count)

        self.chk_random = QCheckBox("随机顺序")
        setting_row.addWidget(self.chk_random)

        self.chk_wrong = QCheckBox("错题练习")
        setting_row.addWidget(self.chk_wrong)

        self.chk_explain = QCheckBox("交卷后显示解析")
        setting_row.addWidget(self.chk_explain)

        self.btn_start = QPushButton("开始考试")
        self.btn_start.clicked.connect(self.start_exam)
        setting_row.addWidget(self.btn_start)

        # ---------- 题目展示 ----------
        self.lbl_progress = QLabel("")
        self.lbl_progress.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(self.lbl_progress)

        self.lbl_question = QLabel("")
        self.lbl_question.setWordWrap(True)
        self.lbl_question.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.lbl_question.setMinimumHeight(60)
        main_layout.addWidget(self.lbl_question)

        # ---------- 选项 ----------
        self.opt_group = QButtonGroup()
        self.opt_group.buttonClicked[int].connect(self.select_option)
        self.opt_box = QGroupBox("选项")
        opt_layout = QVBoxLayout()
        opt_layout.setSpacing(10)
        self.opt_box.setLayout(opt_layout)
        self.opt_radios: List[QRadioButton] = []
        for i in range(self.MAX_OPTIONS):
            rb = QRadioButton("")
            rb.setMinimumHeight(32)
            rb.setStyleSheet(f"font-size: {self.BASE_FONT}pt; padding: 6px 12px;")
            self.opt_radios.append(rb)
            self.opt_group.addButton(rb, i)
            opt_layout.addWidget(rb)
        main_layout.addWidget(self.opt_box)

        # ---------- 按钮区 ----------
        btn_row = QHBoxLayout()
        btn_row.setSpacing(16)
        main_layout.addLayout(btn_row)

        self.btn_prev = QPushButton("上一题")
        self.btn_prev.clicked.connect(self.previous_question)
        btn_row.addWidget(self.btn_prev)

        self.btn_next = QPushButton("下一题")
        self.btn_next.clicked.connect(self.next_question)
        btn_row.addWidget(self.btn_next)

        self.btn_mark = QPushButton("标记")
        self.btn_mark.clicked.connect(self.toggle_mark)
        btn_row.addWidget(self.btn_mark)

        self.btn_submit = QPushButton("交卷")
        self.btn_submit.clicked.connect(self.submit_exam)
        btn_row.addWidget(self.btn_submit)

        # ---------- 反馈 ----------
        self.lbl_feedback = QLabel("")
        self.lbl_feedback.setWordWrap(True)
        self.lbl_feedback.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.lbl_feedback.setMinimumHeight(40)
        main_layout.addWidget(self.lbl_feedback)

    # -------------------------------------------------
    def _apply_style(self):
        """深色 Fusion 主题 + QSS"""
        QApplication.setStyle("Fusion")
        dark_bg = "#23272e"
        card_bg = "#2b2f38"
        accent = "#5a9bd4"
        accent_hover = "#7fb0e2"
        border_radius = 8
        self.setStyleSheet(f"""
            QWidget {{ background-color: {dark_bg}; color: #f0f0f0; }}
            QGroupBox {{
                background-color: {card_bg};
                border-radius: {border_radius}px;
                margin-top: 12px;
                padding: 12px;
                border: 1px solid #444;
            }}
            QLabel {{ line-height: 1.6; }}
            QPushButton {{
                background-color: {accent};
                color: #fff;
                border: none;
                padding: 8px 16px;
                border-radius: {border_radius}px;
                font-weight: 500;
                margin: 4px;
            }}
            QPushButton:hover {{ background-color: {accent_hover}; }}
            QPushButton:disabled {{ background-color: #444; color: #aaa; }}
        """)

    def _load_settings(self):
        settings = self.repository.load().settings
        self.sp_count.setValue(max(1, min(settings.default_question_count, MAX_QUESTION_COUNT)))
        self.chk_random.setChecked(settings.random_order)
        self.chk_explain.setChecked(settings.show_explanation)

    def _set_exam_controls(self, running: bool):
        for btn in (self.btn_prev, self.btn_next, self.btn_mark, self.btn_submit):
            btn.setEnabled(running)
        for w in (self.btn_upload, self.btn_delete_bank, self.btn_start,
                  self.cb_bank, self.cb_category, self.cb_difficulty, self.sp_count,
                  self.chk_random, self.chk_wrong, self.chk_explain):
            w.setEnabled(not running)
        if not running:
            for rb in self.opt_radios:
                rb.hide()

    # -------------------------------------------------
    # ---- 题库 ----
    def refresh_filters(self):
        state = self.repository.load()

        self.cb_bank.clear()
        self.cb_bank.addItem("全部题库", ALL)
        for bank in state.question_banks:
            self.cb_bank.addItem(f"{bank.name}（{len(bank.questions)} 题）", bank.id)

        self.cb_category.clear()
        self.cb_category.addItem("全部分类", ALL)
        for cat in self.repository.get_all_categories():
            self.cb_category.addItem(cat, cat)

    def upload_bank(self):
        patterns = " ".join(f"*{ext}" for ext in SUPPORTED_EXTENSIONS)
        files, _ = QFileDialog.getOpenFileNames(
            self, "选择题库文件", "", f"题库文件 ({patterns})"
        )
        if not files:
            return

        # 解析放到后台线程，导入期间禁止再次导入或开考
        for w in (self.btn_upload, self.btn_delete_bank, self.btn_start):
            w.setEnabled(False)
        self.btn_upload.setText("导入中…")
        self.import_worker = ImportWorker(files, self)
        self.import_worker.done.connect(self._on_import_done)
        self.import_worker.finished.connect(self.import_worker.deleteLater)
        self.import_worker.start()

    def closeEvent(self, event):
        if self.import_worker is not None:
            self.import_worker.wait()
        super().closeEvent(event)

    def _on_import_done(self, results):
        self.import_worker = None
        self.btn_upload.setText("导入题库")
        for w in (self.btn_upload, self.btn_delete_bank, self.btn_start):
            w.setEnabled(True)

        ok_lines, fail_lines = save_imported_banks(self.repository, results)
        self.refresh_filters()
        msg = ""
        if ok_lines:
            msg += "导入成功：\n" + "\n".join(ok_lines)
        if fail_lines:
            msg += ("\n\n" if msg else "") + "导入失败：\n" + "\n".join(fail_lines)
        if fail_lines and not ok_lines:
            QMessageBox.warning(self, "错误", msg)
        else:
            QMessageBox.information(self, "导入结果", msg)

    def delete_bank(self):
        bank_id = self.cb_bank.currentData()
        if bank_id in (None, ALL):
            QMessageBox.information(self, "提示", "请先在下拉框中选择要删除的题库。")
            return
        reply = QMessageBox.question(self, "确认", f"删除题库 {self.cb_bank.currentText()}？")
        if reply != QMessageBox.Yes:
            return
        try:
            self.repository.delete_question_bank(bank_id)
        except OSError as e:
            QMessageBox.warning(self, "错误", f"删除失败:\n{e}")
            return
        self.refresh_filters()

    def show_history(self):
        HistoryDialog(self.repository, self).exec_()

    def show_wrong_answers(self):
        WrongAnswersDialog(self.repository, self).exec_()

    # -------------------------------------------------
    # ---- 开始考试 ----
    def _question_pool(self) -> List[Question]:
        state = self.repository.load()
        if self.chk_wrong.isChecked():
            return wrong_answer_questions(state)
        bank_id = self.cb_bank.currentData()
        pool = []
        for bank in state.question_banks:
            if bank_id in (None, ALL) or bank.id == bank_id:
                pool.extend(bank.questions)
        return pool

    def start_exam(self):
        pool = filter_questions(
            self._question_pool(),
            category=self.cb_category.currentData() or ALL,
            difficulty=self.cb_difficulty.currentData() or ALL,
        )
        if not pool:
            QMessageBox.warning(self, "提示", "当前条件下没有可用的题目，请先导入题库或调整筛选。")
            return

        count = self.sp_count.value()
        random_order = self.chk_random.isChecked()
        try:
            self.repository.update_settings(
                default_question_count=count,
                random_order=random_order,
                show_explanation=self.chk_explain.isChecked(),
            )
        except OSError as e:
            logger.warning("Saving settings failed: %s", e)

        questions = select_exam_questions(pool, count, random_order)
        title = "错题练习" if self.chk_wrong.isChecked() else f"{self.cb_bank.currentText()} 练习"
        title += f" {datetime.now():%m-%d %H:%M}"
        try:
            self.session = ExamSession(questions, title, self.repository)
        except OSError as e:
            QMessageBox.warning(self, "错误", f"创建考试记录失败:\n{e}")
            return

        self.setWindowTitle(f"考试练习 - {title}")
        self._set_exam_controls(True)
        self.lbl_feedback.clear()
        self.clock.start()
        self.show_current_question()

    # -------------------------------------------------
    # ---- 展示当前题目 ----
    def _update_progress(self):
        s = self.session
        if s is None:
            return
        self.lbl_progress.setText(
            f"第 {s.current_index + 1}/{s.total} 题　已答 {s.answered_count} 题　"
            f"用时 {format_clock(s.elapsed_seconds)}"
        )

    def show_current_question(self):
        s = self.session
        q = s.current_question
        if q is None:
            return
        self._update_progress()
        flag = "　🚩" if q.id in s.marked else ""
        self.lbl_question.setText(
            f'<span style="font-size:{self.current_font_size}pt">'
            f'{s.current_index + 1}. {q.content}'
            f'<br><small>[{q.category} · {difficulty_label(q.difficulty)}]{flag}</small></span>'
        )
        self.btn_mark.setText("取消标记" if q.id in s.marked else "标记")

        # 先全部清空，再显示实际存在的选项
        self.opt_group.setExclusive(False)
        for rb in self.opt_radios:
            rb.setChecked(False)
            rb.hide()
        self.opt_group.setExclusive(True)

        chosen = s.answers.get(q.id)
        for i, (letter, opt) in enumerate(zip(q.option_letters(), q.options)):
            if i >= len(self.opt_radios):
                break
            self.opt_radios[i].setText(f"{letter}. {opt}")
            self.opt_radios[i].setChecked(letter == chosen)
            self.opt_radios[i].show()

        self.btn_prev.setEnabled(s.current_index > 0)
        self.btn_next.setEnabled(s.current_index < s.total - 1)

    def select_option(self, button_id: int):
        if self.session is None:
            return
        self.session.answer(chr(ord("A") + button_id))
        self._update_progress()

    def previous_question(self):
        self.session.previous()
        self.show_current_question()

    def next_question(self):
        self.session.next()
        self.show_current_question()

    def toggle_mark(self):
        self.session.toggle_mark()
        self.show_current_question()

    # -------------------------------------------------
    # ---- 交卷 ----
    def submit_exam(self):
        s = self.session
        unanswered = s.total - s.answered_count
        prompt = "确定交卷？"
        if unanswered:
            prompt = f"还有 {unanswered} 题未作答，确定交卷？"
        if QMessageBox.question(self, "交卷", prompt) != QMessageBox.Yes:
            return

        try:
            record = s.submit()
        except OSError as e:
            QMessageBox.warning(self, "错误", f"保存考试结果失败:\n{e}")
            return
        self.clock.stop()

        correct = correct_count(record)
        msg = (f"本次共 {s.total} 题，答对 {correct} 题，"
               f"得分 {record.score}（{score_grade(record.score)}）<br>"
               f"用时 {format_clock(s.elapsed_seconds)}")
        if correct < s.total:
            msg += f"<br>{s.total - correct} 道错题已加入错题本"
        QMessageBox.information(
            self, "考试结束", f'<span style="font-size:{self.current_font_size}pt">{msg}</span>'
        )

        if self.chk_explain.isChecked():
            self.lbl_feedback.setText(self._review_text(s))
        else:
            self.lbl_feedback.clear()
        self._finish()

    def _review_text(self, s: ExamSession) -> str:
        parts = []
        for i, q in enumerate(s.questions, 1):
            if s.is_correct(q):
                continue
            given = s.answers.get(q.id) or "未作答"
            line = f"{i}. 你的答案 {given}，正确答案 {q.correct_answer}"
            if q.explanation:
                line += f"；解析：{q.explanation}"
            parts.append(line)
        return "\n".join(parts) or "全部正确 🎉"

    def _finish(self):
        self.session = None
        self.setWindowTitle("考试练习")
        self.lbl_progress.setText("")
        self.lbl_question.setText("")
        self._set_exam_controls(False)


def main():
    configure_logging()
    app = QApplication(sys.argv)
    window = ExamApp()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
