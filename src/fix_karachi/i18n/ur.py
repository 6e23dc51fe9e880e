# -*- coding: utf-8 -*-
"""Urdu (ur) strings."""

LANG = {
    # Auth
    "auth.title": "فکس کراچی",
    "auth.subtitle": "سیلاب کی رپورٹ کریں۔ زندگیاں بچائیں۔ انعامات حاصل کریں۔",
    "auth.login": "لاگ ان",
    "auth.signup": "سائن اپ",
    "auth.email": "ای میل",
    "auth.password": "پاس ورڈ",
    "auth.name": "پورا نام",
    "auth.selectRole": "اپنا کردار منتخب کریں",
    "auth.citizen": "شہری",
    "auth.citizenDesc": "سیلاب کی رپورٹ کریں اور پوائنٹس حاصل کریں",
    "auth.admin": "منتظم",
    "auth.adminDesc": "رپورٹس کا انتظام کریں اور الرٹ بھیجیں",
    "auth.alreadyHaveAccount": "پہلے سے اکاؤنٹ ہے؟",
    "auth.dontHaveAccount": "اکاؤنٹ نہیں ہے؟",
    "auth.loginHere": "یہاں لاگ ان کریں",
    "auth.signupHere": "یہاں سائن اپ کریں",
    "auth.successTitle": "کامیابی!",
    "auth.signupSuccess": "اکاؤنٹ کامیابی سے بن گیا۔ براہ کرم لاگ ان کریں۔",
    "auth.errorTitle": "خرابی",
    "auth.roleAssignFailed": "اکاؤنٹ بن گیا، لیکن منتظم کا کردار تفویض نہیں ہو سکا۔ براہ کرم سپورٹ سے رابطہ کریں۔",

    # Common
    "common.loading": "لوڈ ہو رہا ہے...",
    "common.dismiss": "بند کریں",
    "errors.serviceUnavailable": "سروس عارضی طور پر دستیاب نہیں۔ براہ کرم بعد میں کوشش کریں۔",

    # Dashboard
    "dashboard.welcome": "خوش آمدید",
    "dashboard.reports": "رپورٹس",
    "dashboard.alerts": "الرٹس",
    "dashboard.points": "پوائنٹس",
    "dashboard.logout": "لاگ آؤٹ",
    "dashboard.citizenSubtitle": "کراچی میں سیلاب کے انتظام پر اپنا اثر دیکھیں",
    "dashboard.adminSubtitle": "سیلاب کی رپورٹس کا انتظام کریں اور کراچی کی حفاظت کریں",
    "dashboard.defaultCitizenName": "شہری",
    "dashboard.adminName": "منتظم",

    # Citizen
    "citizen.submitReport": "رپورٹ جمع کروائیں",
    "citizen.myReports": "میری رپورٹس",
    "citizen.ecoPoints": "ایکو پوائنٹس",
    "citizen.activeAlerts": "فعال الرٹس",
    "citizen.totalReports": "کل رپورٹس",
    "citizen.totalReportsDesc": "جمع کروائی گئی سیلاب کی رپورٹس",
    "citizen.ecoPointsDesc": "تصدیق شدہ رپورٹس سے حاصل کردہ",
    "citizen.activeAlertsDesc": "آپ کے علاقے میں",
    "citizen.submitReportDesc": "اپنے علاقے میں سیلاب یا سڑکوں کی حالت کی رپورٹ کریں",
    "citizen.submitNewReport": "نئی رپورٹ جمع کروائیں",
    "citizen.myReportsDesc": "اپنی جمع کردہ رپورٹس اور ان کی صورتحال دیکھیں",
    "citizen.viewAllReports": "تمام رپورٹس دیکھیں",

    # Admin
    "admin.verifyReports": "رپورٹس کی تصدیق کریں",
    "admin.sendAlert": "الرٹ بھیجیں",
    "admin.manageUsers": "صارفین کا انتظام",
    "admin.statistics": "اعداد و شمار",
    "admin.pendingReports": "زیر التوا رپورٹس",
    "admin.pendingReportsDesc": "تصدیق کی منتظر",
    "admin.verifiedReports": "تصدیق شدہ رپورٹس",
    "admin.verifiedReportsDesc": "کامیابی سے تصدیق شدہ",
    "admin.totalUsers": "کل صارفین",
    "admin.totalUsersDesc": "رجسٹرڈ شہری",
    "admin.activeAlerts": "فعال الرٹس",
    "admin.activeAlertsDesc": "اس وقت فعال",
    "admin.verifyReportsDesc": "شہریوں کی سیلاب رپورٹس کا جائزہ لیں اور تصدیق کریں",
    "admin.sendAlertDesc": "شہریوں کو سیلاب کے الرٹ بنائیں اور بھیجیں",
}
