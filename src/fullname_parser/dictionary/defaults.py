"""
Built-in English lookup tables.

- PREFIX_GROUPS:          display form -> lowercase, period-free synonyms
- LINE_SUFFIXES:          generational markers
- PROFESSIONAL_SUFFIXES:  post-nominal credentials; case and periods are part
                          of the match, so spell them exactly as written
- COMPOUND_MARKERS:       lowercase surname particles
- VOWELS:                 used by the two-letter case rule (not configurable)

Dictionary sorts PROFESSIONAL_SUFFIXES longest-first, so order here only has
to be readable.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

# ==========================================================
# HONORIFIC PREFIXES
# ==========================================================

PREFIX_GROUPS: Dict[str, Tuple[str, ...]] = {
    "Mr.": ("mr", "mister", "master"),
    "Mrs.": ("mrs", "missus", "missis"),
    "Ms.": ("ms", "miss"),
    "Dr.": ("dr",),
    "Rev.": ("rev", "rev'd", "reverend"),
    "Fr.": ("fr", "father"),
    "Sr.": ("sister",),
    "Prof.": ("prof", "professor"),
    "Sir": ("sir",),
    "Hon.": ("honorable",),
    "Pres.": ("president",),
    "Gov": ("governor", "governer"),
    "Ofc": ("officer",),
    "Msgr": ("monsignor",),
    "Br.": ("brother",),
    "Supt.": ("superintendent",),
    "Rep.": ("representative",),
    "Sen.": ("senator",),
    "Amb.": ("ambassador",),
    "Sec.": ("secretary",),
    "Pvt.": ("private",),
    "Cpl.": ("corporal",),
    "Sgt.": ("sargent", "sergeant"),
    "Adm.": ("administrative", "administrator", "administrater"),
    "Maj.": ("major",),
    "Capt.": ("captain",),
    "Cmdr.": ("commander",),
    "Lt.": ("lieutenant",),
    "Col.": ("colonel",),
    "Gen.": ("general",),
    "Bc.": ("bachelor", "baccalaureus"),
    "BcA.": ("bachelor of arts", "baccalaureus artis"),
    "ICDr.": ("doctor of canon law", "juris cononici doctor"),
    "Ing.": ("engineer", "ingenieur"),
    "JUDr.": ("juris doctor utriusque", "doctor rights"),
    "MDDr.": ("doctor of dental medicine", "medicinae doctor dentium"),
    "MgA.": ("master of arts", "magister artis"),
    "Mgr.": ("master",),
    "MD.": ("doctor of general medicine",),
    "DVM.": ("doctor of veterinary medicine",),
    "PhDr.": ("doctor of philosophy",),
    "PhMr.": ("master of pharmacy",),
    "RCDr.": ("doctor of business studies",),
    "RNDr.": ("doctor of science",),
    "DSc.": ("doctor of science",),
    "RSDr.": ("doctor of socio-political sciences",),
    "RTDr.": ("doctor of technical sciences",),
    "ThDr.": ("doctor of theology",),
    "Th.D.": ("doctor of theology",),
    "Acad.": ("academian", "academic"),
    "ArtD.": ("doctor of arts",),
    "DiS.": ("certified specialist",),
    "As.": ("assistant",),
    "Doc.": ("associate professor",),
    "Treas.": ("treasurer",),
    "ThLic.": ("licentiate of theology",),
    "ThMgr.": ("master of theology", "master of divinity"),
    "PaedDr.": ("doctor of education",),
    "Odb. As.": ("assistant professor",),
    "Lt. Col.": ("lieutenant colonel",),
    "PharmDr.": ("doctor of pharmacy",),
    "Ing. sheet.": ("architect engineer", "intrudes upon architectus"),
    # "The Rev. ..." -> the article is dropped, nothing is displayed
    "": ("the",),
}

# ==========================================================
# SUFFIXES
# ==========================================================

LINE_SUFFIXES: Tuple[str, ...] = (
    "I", "II", "III", "IV", "V",
    "1st", "2nd", "3rd", "4th", "5th",
    "Senior", "Junior", "Jr", "Sr",
)

PROFESSIONAL_SUFFIXES: Tuple[str, ...] = (
    "AO", "B.A.", "M.Sc", "BCompt", "PhD", "Ph.D.", "APR", "RPh", "PE", "MD",
    "M.D.", "MA", "DMD", "CME", "BSc", "Bsc", "BSc(hons)", "BEng", "M.B.A.",
    "MBA", "FAICD", "CM", "OBC", "M.B.", "ChB", "FRCP", "FRSC", "FREng", "Esq",
    "MEng", "MSc", "J.D.", "JD", "BGDipBus", "Dip", "Dipl.Phys", "M.H.Sc.",
    "MPA", "B.Comm", "B.Eng", "B.Acc", "FSA", "PGDM", "FCPA", "RN", "R.N.",
    "MSN", "PCA", "PCCRM", "PCFP", "PCGD", "PCHR", "PCM", "PCPS", "PCPM",
    "PCSCM", "PCSM", "PCMM", "PCTC", "ACA", "FCA", "ACMA", "FCMA", "AAIA",
    "FAIA", "CCC", "MIPA", "FIPA", "CIA", "CFE", "CISA", "CFAP", "QC", "Q.C.",
    "M.Tech", "CTA", "C.I.M.A.", "B.Ec", "CFIA", "ICCP", "CPS", "CAP-OM",
    "CAPTA", "TNAOAP", "AFA", "AVA", "ASA", "CAIA", "CBA", "CVA", "ICVS",
    "CIIA", "CMU", "PFM", "PRM", "CFP", "CWM", "CCP", "EA", "CCMT", "CGAP",
    "CDFM", "CFO", "CGFM", "CGAT", "CGFO", "CMFO", "CPFO", "CPFA", "BMD",
    "BIET", "P.Eng", "MBBS", "MB", "BCh", "BAO", "BMBS", "MBBChir", "MBChBa",
    "MPhil", "LL.D", "LLD", "D.Lit", "DEA", "DESS", "DClinPsy", "DSc", "MRes",
    "M.Res", "Psy.D", "Pharm.D", "BA(Admin)", "BAcc", "BACom", "BAdmin", "BAE",
    "BAEcon", "BA(Ed)", "BA(FS)", "BAgr", "BAH", "BAI", "BAI(Elect)",
    "BAI(Mech)", "BALaw", "BAppSc", "BArch", "BArchSc", "BARelSt", "BASc",
    "BASoc", "DDS", "D.D.S.", "BASS", "BATheol", "BBA", "BBLS", "BBS", "BBus",
    "BChem", "BCJ", "BCL", "BCLD(SocSc)", "BClinSci", "BCom", "BCombSt",
    "BCommEdCommDev", "BComp", "BComSc", "BCoun", "BD", "BDes", "BE", "BEcon",
    "BEcon&Fin", "M.P.P.M.", "MPPM", "BEconSci", "BEd", "BES", "BEng(Tech)",
    "BFA", "BFin", "BFLS", "BFST", "BH", "BHealthSc", "BHSc", "BHy", "BJur",
    "BL", "BLE", "BLegSc", "BLib", "BLing", "BLitt", "BLittCelt", "BLS",
    "BMedSc", "BMet", "BMid", "BMin", "BMS", "BMSc", "BMus", "BMusEd",
    "BMusPerf", "BN", "BNS", "BNurs", "BOptom", "BPA", "BPharm", "BPhil",
    "TTC", "DIP", "Tchg", "MEd", "ACIB", "FCIM", "FCIS", "FCS", "Fcs",
    "Bachelor", "O.C.", "JP", "C.Eng", "C.P.A.", "B.B.S.", "MBE", "GBE", "KBE",
    "DBE", "CBE", "OBE", "MRICS", "D.P.S.K.", "D.P.P.J.", "DPSK", "DPPJ",
    "B.B.A.", "GBS", "MIGEM", "M.I.G.E.M.", "BPhil(Ed)", "BPhys", "BPhysio",
    "BPl", "BRadiog", "B.Sc", "BScAgr", "BSc(Dairy)", "BSc(DomSc)", "BScEc",
    "BScEcon", "BSc(Econ)", "BSc(Eng)", "BScFor", "BSc(HealthSc)", "BSc(Hort)",
    "BSc(MCRM)", "BSc(Med)", "BSc(Mid)", "BSc(Min)", "BSc(Psych)", "BSc(Tech)",
    "BSD", "BSocSc", "BSS", "BStSu", "BTchg", "BTCP", "BTech", "BTechEd", "BTh",
    "BTheol", "BTS", "EdB", "LittB", "LLB", "MusB", "ScBTech", "CEng", "CFA",
    "Cfa", "C.F.A.", "LL.B", "LLM", "LL.M", "CA(SA)", "C.A.", "CA", "CPA",
    "Solicitor", "DMS", "FIWO", "CEnv", "MICE", "MIWEM", "B.Com", "BA", "BEc",
    "MEc", "HDip", "B.Bus.", "E.S.C.P.",
)

# ==========================================================
# SURNAME PARTICLES
# ==========================================================

COMPOUND_MARKERS: FrozenSet[str] = frozenset({
    "da", "de", "del", "della", "dem", "den", "der", "di", "du", "het", "la",
    "los", "onder", "op", "pietro", "st.", "st", "'t", "ten", "ter", "van",
    "vanden", "vere", "von",
})

VOWELS: FrozenSet[str] = frozenset({"a", "e", "i", "o", "u"})

# Bracketed spans that look like nicknames but are part of a credential,
# e.g. "BSc(hons)".
NOT_NICKNAMES: Tuple[str, ...] = ("(hons)",)
