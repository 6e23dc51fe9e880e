# -*- coding: utf-8 -*-
"""English (en) strings."""

LANG = {
    # Auth
    "auth.title": "Fix Karachi",
    "auth.subtitle": "Report floods. Save lives. Earn rewards.",
    "auth.login": "Login",
    "auth.signup": "Sign Up",
    "auth.email": "Email",
    "auth.password": "Password",
    "auth.name": "Full Name",
    "auth.selectRole": "Select Your Role",
    "auth.citizen": "Citizen",
    "auth.citizenDesc": "Report floods and earn points",
    "auth.admin": "Admin",
    "auth.adminDesc": "Manage reports and send alerts",
    "auth.alreadyHaveAccount": "Already have an account?",
    "auth.dontHaveAccount": "Don't have an account?",
    "auth.loginHere": "Login here",
    "auth.signupHere": "Sign up here",
    "auth.successTitle": "Success!",
    "auth.signupSuccess": "Account created successfully. Please login.",
    "auth.errorTitle": "Error",
    "auth.roleAssignFailed": "Account created, but the admin role could not be assigned. Please contact support.",

    # Common
    "common.loading": "Loading...",
    "common.dismiss": "Dismiss",
    "errors.serviceUnavailable": "Service temporarily unavailable. Please try again later.",

    # Dashboard
    "dashboard.welcome": "Welcome",
    "dashboard.reports": "Reports",
    "dashboard.alerts": "Alerts",
    "dashboard.points": "Points",
    "dashboard.logout": "Logout",
    "dashboard.citizenSubtitle": "Track your impact on Karachi's flood management",
    "dashboard.adminSubtitle": "Manage flood reports and protect Karachi",
    "dashboard.defaultCitizenName": "Citizen",
    "dashboard.adminName": "Admin",

    # Citizen
    "citizen.submitReport": "Submit Report",
    "citizen.myReports": "My Reports",
    "citizen.ecoPoints": "Eco Points",
    "citizen.activeAlerts": "Active Alerts",
    "citizen.totalReports": "Total Reports",
    "citizen.totalReportsDesc": "Flood reports submitted",
    "citizen.ecoPointsDesc": "Earned through verified reports",
    "citizen.activeAlertsDesc": "In your area",
    "citizen.submitReportDesc": "Report flooding or road conditions in your area",
    "citizen.submitNewReport": "Submit New Report",
    "citizen.myReportsDesc": "View your submitted reports and their status",
    "citizen.viewAllReports": "View All Reports",

    # Admin
    "admin.verifyReports": "Verify Reports",
    "admin.sendAlert": "Send Alert",
    "admin.manageUsers": "Manage Users",
    "admin.statistics": "Statistics",
    "admin.pendingReports": "Pending Reports",
    "admin.pendingReportsDesc": "Awaiting verification",
    "admin.verifiedReports": "Verified Reports",
    "admin.verifiedReportsDesc": "Successfully verified",
    "admin.totalUsers": "Total Users",
    "admin.totalUsersDesc": "Registered citizens",
    "admin.activeAlerts": "Active Alerts",
    "admin.activeAlertsDesc": "Currently active",
    "admin.verifyReportsDesc": "Review and verify citizen flood reports",
    "admin.sendAlertDesc": "Create and send flood alerts to citizens",
}
