#!/usr/bin/env python3
"""
单元测试：组合矩阵端到端场景

核心测试场景
============
两个账户：
  A: ARR 100, 每月登录 10 次, 单次 2 小时, 扩展概率 80, 关键人概率 60
  B: ARR  50, 每月登录  5 次, 单次 1 小时, 扩展概率 20, 关键人概率 10

组合统计：arr_max = 100, engagement_max = 10×2 = 20

评分分解
─────────────────────────────────────────────
账户 | Engagement | Expansion | Stakeholder | Potential | Volume
─────────────────────────────────────────────
A    | 20/20×30=30 | 0.8×40=32 | 0.6×30=18  | 80        | 100
B    |  5/20×30=7.5| 0.2×40=8  | 0.1×30=3   | 18.5      | 50
─────────────────────────────────────────────

分类：A → Grow & Scale；B → Protect（volume=50 恰好命中阈值）

像素位置（S=600, P=60, C=480）：
  A → (540, 156)     B → (300, 451.2)

选中 A 时详情框：
  右侧放不下（555+220 > 590）→ 翻到左侧 left = 540-220-15 = 305
  top = 156-90 = 66，不需要夹紧
"""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import Category
from services.portfolio import (
    AccountStore,
    PortfolioService,
    PortfolioView,
    SelectionState,
    export_json,
    import_json,
    parse_form,
)


# ═══════════════════════════════════════════════════════
#  辅助函数：纯数学评分（作为 ground truth）
# ═══════════════════════════════════════════════════════

def expected_potential(engagement, engagement_max, expansion, stakeholder):
    engagement_score = engagement / engagement_max * 30 if engagement_max else 0
    return engagement_score + expansion / 100 * 40 + stakeholder / 100 * 30


def expected_pixel(score):
    return 60 + score / 100 * 480


class TestMatrixScenario(unittest.TestCase):
    """从表单录入到矩阵几何的完整流程"""

    def setUp(self):
        self.store = AccountStore()
        self.view = PortfolioView(self.store)
        self.state = SelectionState()
        self.store.add(parse_form("Acme", "100", "10", "2", "", 80, 60))
        self.store.add(parse_form("Beta", "50", "5", "1", "", 20, 10))

    def _by_name(self, name):
        return next(acc for acc in self.view.calculated if acc.name == name)

    def test_scores(self):
        a, b = self._by_name("Acme"), self._by_name("Beta")
        self.assertAlmostEqual(a.potential_score, expected_potential(20, 20, 80, 60))
        self.assertAlmostEqual(b.potential_score, expected_potential(5, 20, 20, 10))
        self.assertAlmostEqual(a.potential_score, 80)
        self.assertAlmostEqual(b.potential_score, 18.5)
        self.assertEqual(a.volume_score, 100)
        self.assertEqual(b.volume_score, 50)

    def test_categories(self):
        self.assertEqual(self._by_name("Acme").category, Category.GROW_SCALE)
        self.assertEqual(self._by_name("Beta").category, Category.PROTECT)

    def test_pixel_positions(self):
        geo = PortfolioService.matrix_geometry(self.view.calculated)
        a, b = geo["points"]
        self.assertAlmostEqual(a["cx"], expected_pixel(100))
        self.assertAlmostEqual(a["cy"], expected_pixel(100 - 80))
        self.assertAlmostEqual(b["cx"], 300)
        self.assertAlmostEqual(b["cy"], 451.2)

    def test_select_and_tooltip(self):
        acme_id = self._by_name("Acme").id
        self.state = self.state.select_point(acme_id)
        geo = PortfolioService.matrix_geometry(self.view.calculated, self.state.selected_id)
        self.assertAlmostEqual(geo["tooltip"]["left"], 305)
        self.assertAlmostEqual(geo["tooltip"]["top"], 66)

        # 再次点击同一点取消选中
        self.state = self.state.select_point(acme_id)
        geo = PortfolioService.matrix_geometry(self.view.calculated, self.state.selected_id)
        self.assertIsNone(geo["tooltip"])

    def test_edit_rescales_others(self):
        """B 的 ARR 改为 400 后，A 的体量分降为 25，分类翻转"""
        beta = self.store.find(self._by_name("Beta").id)
        self.store.upsert(parse_form("Beta", "400", "5", "1", "", 20, 10, editing=beta))
        acme = self._by_name("Acme")
        self.assertAlmostEqual(acme.volume_score, 25)
        self.assertEqual(acme.category, Category.INCUBATE)
        self.assertEqual(self._by_name("Beta").category, Category.PROTECT)

    def test_delete_clears_selection(self):
        beta_id = self._by_name("Beta").id
        self.state = self.state.select_point(beta_id).start_edit(beta_id)
        self.store.delete(beta_id)
        self.state = self.state.after_delete(beta_id)
        self.assertIsNone(self.state.selected_id)
        self.assertIsNone(self.state.editing_id)
        self.assertEqual(len(self.view.calculated), 1)
        # 只剩 A：自身即最大值
        self.assertEqual(self._by_name("Acme").volume_score, 100)

    def test_export_import_round_trip(self):
        text = export_json(self.store.get())
        restored = import_json(text)
        self.assertEqual(list(restored), list(self.store.get()))
        self.assertEqual(export_json(restored), text)


if __name__ == "__main__":
    unittest.main()
